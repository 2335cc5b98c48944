"""GitHub CLI authentication."""
from __future__ import annotations

from shell_ops import AuthenticationError, ShellOperations

LOGIN_ARGS = ["gh", "auth", "login", "-p", "https", "-w"]
SET_PROTOCOL_ARGS = ["gh", "config", "set", "-h", "github.com", "git_protocol", "https"]


class GhAuth:
    """Handles gh login state."""

    @staticmethod
    def is_authenticated() -> bool:
        return ShellOperations.ok(["gh", "auth", "status"])

    @staticmethod
    def login() -> None:
        """Run the browser-based login flow and pin the git protocol to HTTPS."""
        print("ℹ️  You are not logged in to GitHub via the 'gh' CLI.")
        print("ℹ️  Follow the on-screen instructions to authenticate.")
        status = ShellOperations.interactive(LOGIN_ARGS)
        if status != 0:
            raise AuthenticationError(f"GitHub login failed (exit status {status}).")
        ShellOperations.run(SET_PROTOCOL_ARGS)

    @staticmethod
    def ensure() -> bool:
        """Log in when needed; return True if a login was performed."""
        if GhAuth.is_authenticated():
            print("✅ You are already authenticated with GitHub.")
            return False
        GhAuth.login()
        if not GhAuth.is_authenticated():
            raise AuthenticationError("GitHub login did not produce an active session.")
        print("✅ Authenticated with GitHub.")
        return True
