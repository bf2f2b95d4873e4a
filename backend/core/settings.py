import os
import logging
from dotenv import load_dotenv

# --- Environment Setup ---
BACKEND_DIR = os.path.dirname(os.path.dirname(__file__))
env_filename = os.getenv("ENV_FILE", ".env")
load_dotenv(os.path.join(BACKEND_DIR, env_filename))

# --- Simulation Defaults ---
INITIAL_CASH = float(os.getenv("INITIAL_CASH", "1000"))
PRICE_WINDOW = int(os.getenv("PRICE_WINDOW", "50"))
DEFAULT_GROWTH_RATE = float(os.getenv("DEFAULT_GROWTH_RATE", "0.001"))

DEFAULT_ASSET = os.getenv("DEFAULT_ASSET", "BTC")
DEFAULT_ANCHOR_PRICE = float(os.getenv("DEFAULT_ANCHOR_PRICE", "100"))
DEFAULT_MICRO_TRADE_AMOUNT = float(os.getenv("DEFAULT_MICRO_TRADE_AMOUNT", "1"))
DEFAULT_TRADE_INTERVAL = float(os.getenv("DEFAULT_TRADE_INTERVAL", "3"))
DEFAULT_PRICE_MODEL = os.getenv("DEFAULT_PRICE_MODEL", "linear").lower()

if DEFAULT_PRICE_MODEL not in ("linear", "exponential"):
    logging.warning(f"Unknown DEFAULT_PRICE_MODEL '{DEFAULT_PRICE_MODEL}', falling back to linear")
    DEFAULT_PRICE_MODEL = "linear"

# --- Server ---
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()
HOST = os.getenv("HOST", "127.0.0.1")
PORT = int(os.getenv("PORT", "8000"))
RELOAD = os.getenv("RELOAD", "0") == "1"
