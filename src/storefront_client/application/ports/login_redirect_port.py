from abc import ABC, abstractmethod


class LoginRedirectPort(ABC):
    """Navigation side effect fired when the session can no longer be recovered."""

    @abstractmethod
    def redirect_to_login(self) -> None:
        pass
