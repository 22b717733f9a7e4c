import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

DATABASE_URL = os.environ.get("DATABASE_URL")

# Staff identity is a self-asserted email checked against this suffix
STAFF_EMAIL_DOMAIN = os.environ.get("STAFF_EMAIL_DOMAIN", "@valdosta.edu")

# Bookable hours, inclusive on both ends
OPENING_HOUR = int(os.environ.get("OPENING_HOUR", "8"))
CLOSING_HOUR = int(os.environ.get("CLOSING_HOUR", "16"))

if not (0 <= OPENING_HOUR <= 23 and 0 <= CLOSING_HOUR <= 23):
    raise ValueError("OPENING_HOUR and CLOSING_HOUR must be between 0 and 23.")
if CLOSING_HOUR < OPENING_HOUR:
    raise ValueError("CLOSING_HOUR must not be earlier than OPENING_HOUR.")

# Administrative blocks replace the requester identity with these
STAFF_BLOCK_NAME = os.environ.get("STAFF_BLOCK_NAME", "VSU STAFF")
ADMIN_BLOCK_MESSAGE = os.environ.get(
    "ADMIN_BLOCK_MESSAGE", "Reserved for administrative purposes"
)

MIN_PURPOSE_LENGTH = int(os.environ.get("MIN_PURPOSE_LENGTH", "10"))

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
