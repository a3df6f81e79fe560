"""
Auth schemas for API.
"""

from ninja import Schema
from apps.users.schemas import UserProfileOut


class LoginIn(Schema):
    email: str
    password: str


class AuthOut(Schema):
    user: UserProfileOut
    token: str