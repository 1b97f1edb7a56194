import os

PAGSEGURO_BASE_URL = os.environ.get("PAGSEGURO_BASE_URL", "https://sandbox.api.pagseguro.com")
PAGSEGURO_TOKEN = os.environ.get("PAGSEGURO_TOKEN", "")
PAGSEGURO_TIMEOUT_SECONDS = float(os.environ.get("PAGSEGURO_TIMEOUT_SECONDS", "30"))
SANDBOX_FAILURE_RATE = float(os.environ.get("SANDBOX_FAILURE_RATE", "0"))
