import json
import os

from src.lambdas.register_zoom.handler import lambda_handler

# Uruchamiać z katalogu repo, z ustawionym .env (ZOOM_MEETING_ID + poświadczenia).
event = {
    "httpMethod": "POST",
    "body": json.dumps(
        {
            "fullName": os.getenv("TEST_FULL_NAME", "Test Uczestnik"),
            "email": os.getenv("TEST_EMAIL", "test@example.com"),
            "role": "Tester",
            "sessionTimeSelected": os.getenv("TEST_SESSION_TIME", "2025-01-15T17:00:00Z"),
        }
    ),
}
res = lambda_handler(event, None)
print(res["statusCode"], res["body"])
