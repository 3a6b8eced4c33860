"""
Password Hasher

Credential verifier backed by bcrypt.
"""

import bcrypt


class PasswordHasher:
    def __init__(self, rounds: int = 12):
        self.rounds = rounds

    def hash(self, plaintext: str) -> str:
        return bcrypt.hashpw(plaintext.encode(), bcrypt.gensalt(self.rounds)).decode()

    def verify(self, plaintext: str, stored_hash: str) -> bool:
        try:
            return bcrypt.checkpw(plaintext.encode(), stored_hash.encode())
        except ValueError:
            # Malformed stored hash
            return False

    def burn(self) -> None:
        """Spend the cost of one verification when there is no hash to check."""
        bcrypt.checkpw(b"dummy_password", bcrypt.gensalt(self.rounds))
