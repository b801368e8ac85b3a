from typing import Callable, Optional

from storefront_client.application.ports.login_redirect_port import LoginRedirectPort
from storefront_client.infrastructure.observability.logger_factory_service import get_logger


class LoggingLoginRedirectAdapter(LoginRedirectPort):
    """
    Records the pending navigation to the login page.
    Hosts that own real navigation pass ``navigate`` to receive the target path.
    """

    def __init__(self, login_path: str = "/login", navigate: Optional[Callable[[str], None]] = None):
        self.login_path = login_path
        self.navigate = navigate
        self.pending_redirect: Optional[str] = None

    def redirect_to_login(self) -> None:
        self.pending_redirect = self.login_path
        get_logger("login_redirect").info("Session ended, redirecting to login", target=self.login_path)
        if self.navigate is not None:
            self.navigate(self.login_path)

    def consume(self) -> Optional[str]:
        target, self.pending_redirect = self.pending_redirect, None
        return target
