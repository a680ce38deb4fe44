import os
from dotenv import load_dotenv

load_dotenv()

host = os.getenv("DOMINO_HOST", "0.0.0.0")
port = int(os.getenv("DOMINO_PORT", "8000"))
log_level = os.getenv("DOMINO_LOG_LEVEL", "info").lower()
reload = os.getenv("DOMINO_RELOAD", "false").lower() == "true"

if __name__ == "__main__":
    print(host, port, log_level, reload)
