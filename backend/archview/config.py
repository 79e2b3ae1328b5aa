import os
from dotenv import load_dotenv

# Load .env from project root
load_dotenv()

LOG_LEVEL = os.getenv("ARCHVIEW_LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("ARCHVIEW_LOG_FORMAT", "text")  # text | json
