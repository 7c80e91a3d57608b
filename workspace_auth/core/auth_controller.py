import logging
from contextlib import asynccontextmanager
from typing import Awaitable, Callable, List
from workspace_auth.core.collaborators import CredentialExchange
from workspace_auth.core.reconciliation import ReconciliationEngine
from workspace_auth.schemas.auth import AuthState, CredentialResult, with_loading

logger = logging.getLogger(__name__)

StateListener = Callable[[AuthState], None]

class AuthController:
    """
    Runs sign-in / sign-up against the credential exchange and, on success,
    reconciles the user's workspace before handing the original result back.
    Callers observe progress through immutable AuthState snapshots.
    """

    def __init__(self, credentials: CredentialExchange, engine: ReconciliationEngine):
        self.credentials = credentials
        self.engine = engine
        self._state = AuthState()
        self._listeners: List[StateListener] = []

    @property
    def state(self) -> AuthState:
        return self._state

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _transition(self, is_loading: bool):
        next_state = with_loading(self._state, is_loading)
        if next_state is self._state:
            return
        self._state = next_state
        for listener in list(self._listeners):
            listener(next_state)

    @asynccontextmanager
    async def _busy(self):
        self._transition(True)
        try:
            yield
        finally:
            self._transition(False)

    async def sign_in(self, email: str, password: str) -> CredentialResult:
        return await self._authenticate("sign-in", self.credentials.sign_in, email, password)

    async def sign_up(self, email: str, password: str) -> CredentialResult:
        return await self._authenticate("sign-up", self.credentials.sign_up, email, password)

    async def _authenticate(
        self,
        kind: str,
        exchange: Callable[[str, str], Awaitable[CredentialResult]],
        email: str,
        password: str,
    ) -> CredentialResult:
        async with self._busy():
            try:
                result = await exchange(email, password)
            except Exception as e:
                logger.error(f"Credential exchange failed during {kind}: {e}")
                raise

            if not result.success:
                logger.info(f"{kind} rejected: {result.error}")
                return result

            await self.engine.reconcile()
            return result
