from flask_login import UserMixin
from . import db

# Stored in the password column of accounts created through Google sign-in.
# It is not a bcrypt hash, so it never verifies as a local password.
OAUTH_PASSWORD_PLACEHOLDER = "google"


class User(UserMixin, db.Model):
    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    email = db.Column(db.String(255), unique=True, nullable=False)
    password = db.Column(db.String(255), nullable=False)
    secret = db.Column(db.Text, nullable=True)

    @property
    def is_oauth_only(self):
        return self.password == OAUTH_PASSWORD_PLACEHOLDER

    def __repr__(self):
        return f'<User {self.email}>'
