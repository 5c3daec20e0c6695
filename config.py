import os
import logging
from functools import lru_cache

import firebase_admin
from firebase_admin import credentials, firestore
from dotenv import load_dotenv

load_dotenv()

FIREBASE_CREDENTIALS = os.getenv("FIREBASE_CREDENTIALS", "serviceAccountKey.json")
PROGRAMS_COLLECTION  = os.getenv("PROGRAMS_COLLECTION", "programs")
WHATSAPP_NUMBER      = os.getenv("WHATSAPP_NUMBER", "212778558505")
CURRENCY_LABEL       = os.getenv("CURRENCY_LABEL", "درهم")
LOG_LEVEL            = os.getenv("LOG_LEVEL", "INFO").upper()
CORS_ORIGINS         = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]


# ── Firebase initialization (runs once, only when credentials exist) ──
@lru_cache(maxsize=1)
def get_db():
    """Firestore client, or None when no service account file is configured."""
    if not os.path.isfile(FIREBASE_CREDENTIALS):
        return None
    if not firebase_admin._apps:
        cred = credentials.Certificate(FIREBASE_CREDENTIALS)
        firebase_admin.initialize_app(cred)
    return firestore.client()


def configure_logging(level: str = LOG_LEVEL, force: bool = False) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )


# ── Tier display labels (booking inquiry) ────────────────────────
TIER_LABELS = {
    "economy":  "اقتصادية",
    "standard": "قياسية",
    "comfort":  "مريحة",
    "premium":  "فاخرة",
    "luxury":   "فخمة",
    "deluxe":   "ديلوكس",
}

# ── Room occupancy labels ────────────────────────────────────────
ROOM_LABELS = {
    "single":    "فردية",
    "double":    "مزدوجة",
    "triple":    "ثلاثية",
    "quad":      "رباعية",
    "quintuple": "خماسية",
}
