# scripts/issue_dev_token.py
# Mints a bearer token for local development, signed with JWT_SECRET like the identity provider's.
# usage: python -m scripts.issue_dev_token <subject> [owner|admin] [email]
import sys
from utils.jwt_handler import create_access_token

def main(argv):
    if len(argv) < 2:
        print("usage: python -m scripts.issue_dev_token <subject> [owner|admin] [email]")
        return 1
    subject = argv[1]
    role = argv[2] if len(argv) > 2 else "owner"
    email = argv[3] if len(argv) > 3 else f"{subject}@example.com"
    token = create_access_token({"sub": subject, "role": role, "email": email}, expires_minutes=24 * 60)
    print(token)
    return 0

if __name__ == "__main__":
    sys.exit(main(sys.argv))
