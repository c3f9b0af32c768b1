import pytest

from artfolio.core.errors import AdminDisabledError, AuthenticationError
from artfolio.server.core.config import Settings
from artfolio.server.core.security import check_admin_key, require_admin


class TestCheckAdminKey:
    def test_matching_key(self):
        check_admin_key("secret", "secret")

    @pytest.mark.parametrize("provided", [None, "", "Secret", "secret "])
    def test_wrong_or_missing_key(self, provided):
        with pytest.raises(AuthenticationError):
            check_admin_key(provided, "secret")

    @pytest.mark.parametrize("expected", [None, ""])
    def test_no_configured_key(self, expected):
        with pytest.raises(AdminDisabledError):
            check_admin_key("anything", expected)


@pytest.mark.asyncio
async def test_require_admin_uses_settings():
    settings = Settings(admin_secret_key="k")

    await require_admin(settings, "k")
    with pytest.raises(AuthenticationError):
        await require_admin(settings, "x")
