import os
from dotenv import load_dotenv
load_dotenv()

LOG_LEVEL = os.getenv("TEXTSEAL_LOG_LEVEL", "INFO").upper()
DEFAULT_CIPHER = os.getenv("TEXTSEAL_DEFAULT_CIPHER", "AES-GCM")
DEFAULT_DERIVE = os.getenv("TEXTSEAL_DEFAULT_DERIVE", "PBKDF2")
