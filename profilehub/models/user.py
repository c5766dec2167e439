"""
User Model
"""

from profilehub.extensions import db


class User(db.Model):
    """Account that can sign in; only the password hash is stored"""
    __tablename__ = 'users'

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(80), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(255), nullable=False)

    def __repr__(self):
        return f'<User {self.username}>'
