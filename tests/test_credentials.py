"""Tests for credential management module."""

from unittest.mock import patch

import pytest
from keyring.errors import PasswordDeleteError
from pydantic import ValidationError

import upbank.credentials as credentials

VALID_TOKEN = "up:yeah:abcDEF123456"


class TestGetCredential:
    """Test get function."""

    @patch('upbank.credentials.keyring')
    def test_get_from_keyring(self, mock_keyring):
        """Should return credential from keyring."""
        mock_keyring.get_password.return_value = "keyring_value"

        result = credentials.get("test_key")

        assert result == "keyring_value"
        mock_keyring.get_password.assert_called_once_with("upbank", "test_key")

    @patch('upbank.credentials.keyring')
    def test_get_returns_none_when_missing(self, mock_keyring):
        mock_keyring.get_password.return_value = None

        assert credentials.get("test_key") is None


class TestAccessToken:
    """Test access token storage and lookup."""

    @patch('upbank.credentials.keyring')
    def test_set_valid_token(self, mock_keyring):
        result = credentials.set_access_token(VALID_TOKEN)

        assert result is True
        mock_keyring.set_password.assert_called_once_with("upbank", credentials.KEY_ACCESS_TOKEN, VALID_TOKEN)

    @patch('upbank.credentials.keyring')
    def test_set_invalid_token_raises(self, mock_keyring):
        with pytest.raises(ValidationError):
            credentials.set_access_token("not-a-token")

        mock_keyring.set_password.assert_not_called()

    @patch('upbank.credentials.keyring')
    def test_get_from_keyring(self, mock_keyring):
        mock_keyring.get_password.return_value = VALID_TOKEN

        token = credentials.get_access_token()

        assert token.value == VALID_TOKEN

    @patch('upbank.credentials.load_dotenv')
    @patch('upbank.credentials.keyring')
    def test_falls_back_to_environment(self, mock_keyring, mock_load_dotenv, monkeypatch):
        mock_keyring.get_password.return_value = None
        monkeypatch.setenv("UP_ACCESS_TOKEN", VALID_TOKEN)

        token = credentials.get_access_token()

        assert token.value == VALID_TOKEN
        mock_load_dotenv.assert_called_once()

    @patch('upbank.credentials.load_dotenv')
    @patch('upbank.credentials.keyring')
    def test_missing_everywhere(self, mock_keyring, mock_load_dotenv, monkeypatch):
        mock_keyring.get_password.return_value = None
        monkeypatch.delenv("UP_ACCESS_TOKEN", raising=False)

        assert credentials.get_access_token() is None

    @patch('upbank.credentials.keyring')
    def test_clear_token(self, mock_keyring):
        assert credentials.clear_access_token() is True
        mock_keyring.delete_password.assert_called_once_with("upbank", credentials.KEY_ACCESS_TOKEN)

    @patch('upbank.credentials.keyring')
    def test_clear_missing_token(self, mock_keyring):
        mock_keyring.delete_password.side_effect = PasswordDeleteError("not found")

        assert credentials.clear_access_token() is False


class TestMaskCredential:
    """Test mask function."""

    def test_mask_long_credential(self):
        result = credentials.mask("up:yeah:abcdefgh")

        assert result == "************efgh"

    def test_mask_short_credential(self):
        assert credentials.mask("abc") == "***"

    def test_mask_none_credential(self):
        assert credentials.mask(None) == "<not set>"

    def test_mask_credential_custom_show_chars(self):
        assert credentials.mask("1234567890", show_chars=2) == "********90"
