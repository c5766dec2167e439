"""
Profile Model
"""

from profilehub.extensions import db


class Profile(db.Model):
    """A person record managed through the profile pages"""
    __tablename__ = 'profiles'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=False)
    age = db.Column(db.Integer, nullable=False)
    occupation = db.Column(db.String(255), nullable=False)

    def __repr__(self):
        return f'<Profile {self.id}:{self.name}>'
