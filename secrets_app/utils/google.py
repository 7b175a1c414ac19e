import base64
import os
from urllib.parse import urlencode

import requests

GOOGLE_SCOPE = "profile email"


class GoogleOAuthError(Exception):
    """Token exchange or profile fetch against Google failed."""


def random_token(nbytes=32):
    return base64.urlsafe_b64encode(os.urandom(nbytes)).decode("ascii").rstrip("=")


class GoogleOAuthClient:
    """Authorization-code flow against Google's OAuth2 endpoints."""

    def __init__(self, client_id, client_secret, callback_url, authorize_url, token_url, userinfo_url, timeout=10):
        self.client_id = client_id
        self.client_secret = client_secret
        self.callback_url = callback_url
        self.authorize_endpoint = authorize_url
        self.token_endpoint = token_url
        self.userinfo_endpoint = userinfo_url
        self.timeout = timeout

    @classmethod
    def from_config(cls, config):
        return cls(
            client_id=config.get("GOOGLE_CLIENT_ID"),
            client_secret=config.get("GOOGLE_CLIENT_SECRET"),
            callback_url=config["GOOGLE_CALLBACK_URL"],
            authorize_url=config["GOOGLE_AUTHORIZE_URL"],
            token_url=config["GOOGLE_TOKEN_URL"],
            userinfo_url=config["GOOGLE_USERINFO_URL"],
            timeout=config.get("GOOGLE_HTTP_TIMEOUT", 10),
        )

    @property
    def enabled(self):
        return bool(self.client_id and self.client_secret)

    def authorization_url(self, state):
        params = {
            "client_id": self.client_id,
            "redirect_uri": self.callback_url,
            "response_type": "code",
            "scope": GOOGLE_SCOPE,
            "state": state,
        }
        return f"{self.authorize_endpoint}?{urlencode(params)}"

    def exchange_code(self, code):
        payload = {
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "grant_type": "authorization_code",
            "code": code,
            "redirect_uri": self.callback_url,
        }
        try:
            r = requests.post(self.token_endpoint, data=payload, timeout=self.timeout)
        except requests.RequestException as e:
            raise GoogleOAuthError(f"Token request failed: {e}") from e
        if r.status_code >= 400:
            # Body may echo the code; keep the message minimal.
            raise GoogleOAuthError(f"Token exchange failed (status={r.status_code})")
        try:
            data = r.json()
        except ValueError as e:
            raise GoogleOAuthError("Invalid token response") from e
        token = data.get("access_token") if isinstance(data, dict) else None
        if not token:
            raise GoogleOAuthError("Token response missing access_token")
        return token

    def fetch_profile(self, access_token):
        headers = {"Authorization": f"Bearer {access_token}"}
        try:
            r = requests.get(self.userinfo_endpoint, headers=headers, timeout=self.timeout)
        except requests.RequestException as e:
            raise GoogleOAuthError(f"Userinfo request failed: {e}") from e
        if r.status_code >= 400:
            raise GoogleOAuthError(f"Userinfo fetch failed (status={r.status_code})")
        try:
            data = r.json()
        except ValueError as e:
            raise GoogleOAuthError("Invalid userinfo response") from e
        if not isinstance(data, dict):
            raise GoogleOAuthError("Invalid userinfo response")
        return data

    def profile_for_code(self, code):
        return self.fetch_profile(self.exchange_code(code))
