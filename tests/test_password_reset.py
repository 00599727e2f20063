import json
from datetime import timedelta

import pytest
from rental_manager.repositories.reset_token_repository import ResetTokenRepository
from rental_manager.schemas.reset_schemas import ResetToken
from rental_manager.services.password_reset_service import generate_reset_code


class TestInitiatePasswordReset:
    """Tests for issuing reset codes"""

    def test_known_phone(self, directory):
        result = directory.initiate_password_reset("9876543211")

        assert result.success is True
        assert len(result.reset_code) == 6
        assert result.reset_code.isdigit()
        assert result.message == f"Reset code sent to 9876543211. For demo, code is: {result.reset_code}"

    def test_unknown_phone(self, directory):
        result = directory.initiate_password_reset("1111111111")

        assert result.success is False
        assert result.message == "Phone number not found"
        assert result.reset_code is None
        assert directory.kv.get("passwordResets") is None

    def test_token_expires_in_one_hour(self, directory, kv_store, clock):
        directory.initiate_password_reset("9876543211")

        stored = json.loads(kv_store.get("passwordResets"))
        token = ResetToken.model_validate(stored[0])
        assert token.user_id == "2"
        assert token.expires_at == clock() + timedelta(hours=1)

    def test_earlier_codes_stay_valid(self, directory):
        """Requesting again does not invalidate earlier codes"""
        first = directory.initiate_password_reset("9876543211").reset_code
        second = directory.initiate_password_reset("9876543211").reset_code

        assert directory.validate_reset_code(first).valid
        assert directory.validate_reset_code(second).valid

    def test_code_range(self):
        for _ in range(200):
            assert 100000 <= int(generate_reset_code()) <= 999999


class TestValidateResetCode:
    """Tests for checking codes"""

    def test_valid_code(self, directory):
        code = directory.initiate_password_reset("9876543211").reset_code

        result = directory.validate_reset_code(code)

        assert result.valid is True
        assert result.user_id == "2"

    def test_unknown_code(self, directory):
        result = directory.validate_reset_code("000000")

        assert result.valid is False
        assert result.user_id is None
        assert result.message == "Invalid or expired reset code"

    def test_expired_code(self, directory, clock):
        """A token past its expiry always fails, even with the right code"""
        code = directory.initiate_password_reset("9876543211").reset_code
        clock.advance(hours=1)

        assert directory.validate_reset_code(code).valid is False

    def test_just_before_expiry(self, directory, clock):
        code = directory.initiate_password_reset("9876543211").reset_code
        clock.advance(minutes=59, seconds=59)

        assert directory.validate_reset_code(code).valid is True

    def test_stored_past_token(self, directory, kv_store, clock):
        kv_store.set(
            "passwordResets",
            json.dumps(
                [{"userId": "2", "code": "123456", "expiresAt": (clock() - timedelta(seconds=1)).isoformat()}]
            ),
        )

        assert directory.validate_reset_code("123456").valid is False

    def test_code_not_bound_to_requester(self, directory):
        """Any holder of a live code can use it"""
        code = directory.initiate_password_reset("9876543212").reset_code
        directory.login("tenant1@building.com", "tenant123")

        result = directory.validate_reset_code(code)

        assert result.valid is True
        assert result.user_id == "3"


class TestResetPassword:
    """Tests for completing a reset"""

    def test_end_to_end(self, directory):
        code = directory.initiate_password_reset("9876543211").reset_code
        assert directory.validate_reset_code(code).valid

        result = directory.reset_password(code, "newpass1")

        assert result.success is True
        assert result.message == "Password reset successful"
        user = next(u for u in directory.get_all_users() if u.uid == "2")
        assert user.password == "newpass1"
        assert directory.validate_reset_code(code).valid is False

    def test_new_password_logs_in(self, directory):
        code = directory.initiate_password_reset("9876543211").reset_code
        directory.reset_password(code, "newpass1")

        assert directory.login("tenant1@building.com", "tenant123") is None
        assert directory.login("tenant1@building.com", "newpass1").uid == "2"

    def test_other_users_untouched(self, directory):
        code = directory.initiate_password_reset("9876543211").reset_code
        directory.reset_password(code, "newpass1")

        owner = next(u for u in directory.get_all_users() if u.uid == "1")
        assert owner.password == "owner123"

    def test_invalid_code(self, directory):
        result = directory.reset_password("000000", "newpass1")

        assert result.success is False
        assert result.message == "Invalid or expired reset code"

    def test_expired_code(self, directory, clock):
        code = directory.initiate_password_reset("9876543211").reset_code
        clock.advance(hours=2)

        result = directory.reset_password(code, "newpass1")

        assert result.success is False
        assert directory.login("tenant1@building.com", "tenant123") is not None

    def test_removes_every_token_with_code(self, directory, kv_store, clock):
        """Duplicate tokens with the used code are all consumed"""
        expires = (clock() + timedelta(hours=1)).isoformat()
        kv_store.set(
            "passwordResets",
            json.dumps(
                [
                    {"userId": "2", "code": "123456", "expiresAt": expires},
                    {"userId": "2", "code": "654321", "expiresAt": expires},
                    {"userId": "2", "code": "123456", "expiresAt": expires},
                ]
            ),
        )

        directory.reset_password("123456", "newpass1")

        remaining = json.loads(kv_store.get("passwordResets"))
        assert [t["code"] for t in remaining] == ["654321"]

    def test_user_gone(self, directory, kv_store, clock):
        """A code for a missing user fails and is not consumed"""
        expires = (clock() + timedelta(hours=1)).isoformat()
        kv_store.set("passwordResets", json.dumps([{"userId": "42", "code": "123456", "expiresAt": expires}]))

        result = directory.reset_password("123456", "newpass1")

        assert result.success is False
        assert result.message == "User not found"
        assert directory.validate_reset_code("123456").valid is True


    def test_failed_code_removal_keeps_old_password(self, directory, monkeypatch):
        """If the code cannot be consumed, the password change is rolled back"""
        code = directory.initiate_password_reset("9876543211").reset_code

        def fail(self, code):
            raise RuntimeError("storage unavailable")

        monkeypatch.setattr(ResetTokenRepository, "delete_by_code", fail)

        with pytest.raises(RuntimeError):
            directory.reset_password(code, "newpass1")

        user = next(u for u in directory.get_all_users() if u.uid == "2")
        assert user.password == "tenant123"
        assert directory.validate_reset_code(code).valid is True
        assert not directory.kv.in_transaction

class TestPurgeExpired:
    def test_purge(self, directory, clock):
        old = directory.initiate_password_reset("9876543211").reset_code
        clock.advance(minutes=90)
        new = directory.initiate_password_reset("9876543212").reset_code

        assert directory.purge_expired_reset_tokens() == 1
        assert directory.validate_reset_code(new).valid
        assert directory.validate_reset_code(old).valid is False
        assert directory.purge_expired_reset_tokens() == 0
