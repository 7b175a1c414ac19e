from sqlalchemy.exc import IntegrityError

from .models import User


class DuplicateEmailError(Exception):
    """Raised when an insert collides with an existing email."""

    def __init__(self, email):
        super().__init__(f"Email already registered: {email}")
        self.email = email


def normalize_email(email):
    return (email or "").strip().lower()


class UserRepository:
    """
    Reads and writes rows of the ``users`` table.

    All lookups go through the ORM, so values are always bound parameters.
    """

    def __init__(self, session):
        self.session = session

    def get(self, user_id):
        return self.session.get(User, user_id)

    def find_by_email(self, email):
        return self.session.query(User).filter_by(email=normalize_email(email)).first()

    def create(self, email, password):
        email = normalize_email(email)
        user = User(email=email, password=password)
        self.session.add(user)
        try:
            self.session.commit()
        except IntegrityError as e:
            # Unique constraint on email; another request won the race
            self.session.rollback()
            raise DuplicateEmailError(email) from e
        return user

    def update_secret(self, email, secret):
        user = self.find_by_email(email)
        if user is None:
            return None
        user.secret = secret
        self.session.commit()
        return user
