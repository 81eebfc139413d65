"""Tests for session auth: signup, login, session lookup, logout."""

import pytest

from app.core.exceptions import AlreadyExistsError, InvalidCredentialsError, NotFoundError
from app.core.timeutils import now_ms
from app.db.repositories.user import AuthSessionRepository, UserRepository
from app.models.user import AuthSession, User
from app.services.auth_service import AuthService, normalize_email

FOURTEEN_DAYS_MS = 14 * 24 * 60 * 60 * 1000


@pytest.fixture
def service(db):
    return AuthService(db)


def _expire(db, token: str) -> None:
    repo = AuthSessionRepository(db)
    record = repo.get_by_token(token)
    record.expires_at = now_ms() - 1000
    db.add(record)
    db.commit()


class TestNormalizeEmail:
    def test_trims_and_lowercases(self):
        assert normalize_email("  Ada@Example.COM ") == "ada@example.com"


class TestSignup:
    def test_returns_session_and_user_key(self, service):
        before = now_ms()
        result = service.signup("ada@example.com", "secret-pw", "Ada")
        assert result.token
        assert result.user_key == f"user-{result.user.id}"
        assert result.user.email == "ada@example.com"
        assert result.user.name == "Ada"
        assert before + FOURTEEN_DAYS_MS <= result.expires_at <= now_ms() + FOURTEEN_DAYS_MS

    def test_duplicate_email_case_insensitive(self, service):
        service.signup("ada@example.com", "secret-pw", "Ada")
        with pytest.raises(AlreadyExistsError):
            service.signup(" ADA@example.com", "other", "Other")

    def test_concurrent_duplicate_is_already_exists(self, service, db, monkeypatch):
        service.signup("ada@example.com", "secret-pw", "Ada")
        # Second request passed the existence check before the first committed
        monkeypatch.setattr(UserRepository, "exists_by_email", lambda self, email: False)

        with pytest.raises(AlreadyExistsError):
            service.signup("ada@example.com", "other", "Other")
        assert UserRepository(db).get_by_email("ada@example.com").name == "Ada"

    def test_name_defaults_to_local_part(self, service):
        assert service.signup("grace@example.com", "pw", "").user.name == "grace"

    def test_password_is_not_stored_in_clear(self, service, db):
        service.signup("ada@example.com", "secret-pw", "Ada")
        user = UserRepository(db).get_by_email("ada@example.com")
        assert "secret-pw" not in user.password_hash


class TestLogin:
    def test_success(self, service):
        signed = service.signup("ada@example.com", "secret-pw", "Ada")
        result = service.login("Ada@Example.com", "secret-pw")
        assert result.token != signed.token
        assert result.user_key == signed.user_key

    def test_unknown_email(self, service):
        with pytest.raises(NotFoundError):
            service.login("nobody@example.com", "pw")

    def test_wrong_password(self, service):
        service.signup("ada@example.com", "secret-pw", "Ada")
        with pytest.raises(InvalidCredentialsError):
            service.login("ada@example.com", "wrong")

    def test_sweeps_only_expired_sessions(self, service, db):
        live = service.signup("ada@example.com", "secret-pw", "Ada")
        stale = service.login("ada@example.com", "secret-pw")
        _expire(db, stale.token)

        service.login("ada@example.com", "secret-pw")

        repo = AuthSessionRepository(db)
        assert repo.get_by_token(stale.token) is None
        assert repo.get_by_token(live.token) is not None
        assert len(repo.get_all_by_user(live.user.id)) == 2

    def test_legacy_hash_login_upgrades(self, service, db):
        users = UserRepository(db)
        user = users.create(User(email="old@example.com", name="Old", password_hash="b:c21"))

        result = service.login("old@example.com", "a")
        assert result.user.id == user.id

        upgraded = users.get_by_id(user.id)
        assert upgraded.password_hash.startswith("$pbkdf2-sha256$")
        assert service.login("old@example.com", "a").user.id == user.id


class TestSession:
    def test_roundtrip(self, service):
        signed = service.signup("ada@example.com", "secret-pw", "Ada")
        current = service.session(signed.token)
        assert current.user.email == "ada@example.com"
        assert current.user.name == "Ada"
        assert current.user_key == signed.user_key
        assert current.expires_at == signed.expires_at

    @pytest.mark.parametrize("token", [None, "", "unknown-token"])
    def test_missing_or_unknown(self, service, token):
        assert service.session(token) is None

    def test_expired_is_none_but_kept(self, service, db):
        signed = service.signup("ada@example.com", "secret-pw", "Ada")
        _expire(db, signed.token)
        assert service.session(signed.token) is None
        assert AuthSessionRepository(db).get_by_token(signed.token) is not None

    def test_orphan_session(self, service, db):
        repo = AuthSessionRepository(db)
        repo.create(AuthSession(user_id=999, token="orphan", expires_at=now_ms() + 60_000))
        assert service.session("orphan") is None


class TestLogout:
    def test_logout_ends_session(self, service):
        signed = service.signup("ada@example.com", "secret-pw", "Ada")
        assert service.logout(signed.token).ok is True
        assert service.session(signed.token) is None

    def test_logout_unknown_token_is_ok(self, service):
        assert service.logout("unknown").ok is True
        assert service.logout(None).ok is True

    def test_other_sessions_survive(self, service):
        first = service.signup("ada@example.com", "secret-pw", "Ada")
        second = service.login("ada@example.com", "secret-pw")
        service.logout(second.token)
        assert service.session(first.token) is not None
