import os

# Seconds between a correct answer and the automatic next problem
ADVANCE_DELAY_SECONDS = float(os.getenv("ADVANCE_DELAY_SECONDS", "2.0"))

# Consecutive correct answers needed to leave a tier
PROMOTION_STREAK = int(os.getenv("PROMOTION_STREAK", "5"))

# Optional JSON file overriding the built-in range table
RANGES_FILE = os.getenv("RANGES_FILE") or None

if ADVANCE_DELAY_SECONDS < 0:
    raise RuntimeError(f"ADVANCE_DELAY_SECONDS must be >= 0, got {ADVANCE_DELAY_SECONDS}")
if PROMOTION_STREAK < 1:
    raise RuntimeError(f"PROMOTION_STREAK must be >= 1, got {PROMOTION_STREAK}")

# Sessions idle longer than this are closed and dropped
SESSION_TTL_SECONDS = float(os.getenv("SESSION_TTL_SECONDS", "1800"))

if SESSION_TTL_SECONDS <= 0:
    raise RuntimeError(f"SESSION_TTL_SECONDS must be > 0, got {SESSION_TTL_SECONDS}")
