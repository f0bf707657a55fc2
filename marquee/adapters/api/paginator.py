"""
Moteur de pagination des films a venir.

Le paginateur tourne dans une tache asyncio independante. A chaque
battement de la cadence (1 seconde par defaut) il execute un cycle:

    attente (battement ou annulation) -> requete -> decodage -> emission -> lien "next"

Les pages sont remises au consommateur une par une (remise synchrone:
le paginateur attend que la page soit prise avant de continuer). Le flux
est ferme exactement une fois quand le paginateur s'arrete, que ce soit
par epuisement, annulation ou erreur. En cas d'erreur, l'iteration du
flux se termine en relevant l'erreur apres les pages deja recues.

Usage:
    paginator = UpcomingMoviesPaginator(http_client, first_url, cancel=event)
    async for page in paginator.start():
        print(page.total, len(page.movies))
"""

import asyncio
from enum import Enum
from typing import Optional

import httpx
from loguru import logger

from marquee.adapters.api.response_parser import parse_upcoming_movies_response
from marquee.adapters.api.retry import request_with_retry
from marquee.core.entities.listing import UpcomingMoviesPage
from marquee.core.errors import PaginationError, TransportError, UpcomingMoviesError

DEFAULT_INTERVAL = 1.0

_END = object()


class PaginatorState(Enum):
    """Etat du paginateur. STOPPED est terminal."""

    IDLE = "idle"
    RUNNING = "running"
    STOPPED = "stopped"


class StopReason(Enum):
    """Cause de l'arret du paginateur.

    Valeurs:
        EXHAUSTED: Derniere page recue (pas de lien "next")
        CANCELLED: Annulation demandee par l'appelant
        FAILED: Erreur de transport, de statut ou de decodage
    """

    EXHAUSTED = "exhausted"
    CANCELLED = "cancelled"
    FAILED = "failed"


def redact_url(url: str) -> str:
    """Masque la cle API d'une URL avant de la journaliser."""
    try:
        parsed = httpx.URL(url)
    except httpx.InvalidURL:
        return url
    if "apikey" not in parsed.params:
        return url
    return str(parsed.copy_set_param("apikey", "***"))


class PageStream:
    """
    Flux asynchrone des pages produites par un paginateur.

    Iterable une seule fois (async for), non redemarrable. La fin du flux
    est signalee par StopAsyncIteration, ou par l'erreur qui a arrete
    le paginateur.

    Un consommateur qui quitte la boucle avant la fin doit appeler aclose()
    (ou utiliser le flux comme context manager async): sinon la tache du
    paginateur reste bloquee sur la remise de la page suivante.

    Attributes:
        stop_reason: Cause de l'arret, None tant que le paginateur tourne
        error: Erreur terminale, None si arret normal
    """

    def __init__(self) -> None:
        self._queue: asyncio.Queue = asyncio.Queue(maxsize=1)
        self._task: Optional[asyncio.Task] = None
        self._done = False
        self.stop_reason: Optional[StopReason] = None
        self.error: Optional[UpcomingMoviesError] = None

    @property
    def closed(self) -> bool:
        """Indique si le paginateur a ferme le flux."""
        return self.stop_reason is not None

    def __aiter__(self) -> "PageStream":
        return self

    async def __anext__(self) -> UpcomingMoviesPage:
        if self._done:
            raise StopAsyncIteration

        item = await self._queue.get()
        self._queue.task_done()
        if item is _END:
            self._done = True
            if self.error is not None:
                raise self.error
            raise StopAsyncIteration
        return item

    async def aclose(self) -> None:
        """Arrete le paginateur depuis le consommateur et ferme le flux."""
        self._done = True
        if self._task is not None and not self._task.done():
            self._task.cancel()
            await asyncio.wait([self._task])

    async def __aenter__(self) -> "PageStream":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    async def _deliver(self, page: UpcomingMoviesPage) -> None:
        # Remise synchrone: rend la main quand le consommateur a pris la page
        await self._queue.put(page)
        await self._queue.join()

    def _finish(self, reason: StopReason, error: Optional[UpcomingMoviesError]) -> None:
        self.stop_reason = reason
        self.error = error
        while not self._queue.empty():
            self._queue.get_nowait()
        self._queue.put_nowait(_END)


class _Ticker:
    """
    Cadence a rythme fixe.

    Un battement manque (cycle plus long que l'intervalle) est rattrape
    immediatement une seule fois, puis la cadence reprend.
    """

    def __init__(self, interval: float) -> None:
        self._loop = asyncio.get_running_loop()
        self._interval = interval
        self._deadline = self._loop.time() + interval

    async def wait(self, cancel: Optional[asyncio.Event]) -> bool:
        """Attend le prochain battement. Retourne False si l'annulation arrive avant."""
        if cancel is not None and cancel.is_set():
            return False

        delay = self._deadline - self._loop.time()
        if delay > 0:
            if cancel is None:
                await asyncio.sleep(delay)
            else:
                try:
                    await asyncio.wait_for(cancel.wait(), timeout=delay)
                    return False
                except asyncio.TimeoutError:
                    pass

        now = self._loop.time()
        missed = max(0, int((now - self._deadline) // self._interval))
        self._deadline += (missed + 1) * self._interval
        return True


class UpcomingMoviesPaginator:
    """
    Machine a etats de la pagination: IDLE -> RUNNING -> STOPPED.

    Une seule requete est en vol a la fois; les pages sont emises dans
    l'ordre de la chaine des liens "next". L'annulation est observee au
    debut de chaque cycle, et pendant la requete si interrupt_fetch est actif.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        url: str,
        cancel: Optional[asyncio.Event] = None,
        interval: float = DEFAULT_INTERVAL,
        max_attempts: int = 1,
        max_wait: int = 60,
        interrupt_fetch: bool = False,
    ) -> None:
        """
        Initialise le paginateur.

        Args:
            client: Client httpx utilise pour les requetes
            url: URL de la premiere page
            cancel: Signal d'annulation optionnel
            interval: Intervalle entre deux cycles, en secondes
            max_attempts: Tentatives par page sur reponse 429 (1 = pas de retry)
            max_wait: Delai maximum entre deux tentatives, en secondes
            interrupt_fetch: Si True, l'annulation interrompt la requete en vol
        """
        if interval <= 0:
            raise ValueError("interval must be positive")

        self._client = client
        self._url = url
        self._cancel = cancel
        self._interval = interval
        self._max_attempts = max_attempts
        self._max_wait = max_wait
        self._interrupt_fetch = interrupt_fetch
        self._state = PaginatorState.IDLE
        self._stream: Optional[PageStream] = None

    @property
    def state(self) -> PaginatorState:
        return self._state

    def start(self) -> PageStream:
        """
        Lance la boucle de pagination dans une nouvelle tache.

        Doit etre appele depuis une boucle asyncio en cours d'execution.

        Raises:
            RuntimeError: Si le paginateur a deja ete demarre
        """
        if self._state is not PaginatorState.IDLE:
            raise RuntimeError(f"paginator already started (state: {self._state.value})")

        self._stream = PageStream()
        self._state = PaginatorState.RUNNING
        self._stream._task = asyncio.create_task(self._run(self._stream))
        return self._stream

    async def _run(self, stream: PageStream) -> None:
        reason = StopReason.FAILED
        error: Optional[UpcomingMoviesError] = None
        url = self._url
        ticker = _Ticker(self._interval)
        cycle = 0

        try:
            while True:
                if not await ticker.wait(self._cancel):
                    reason = StopReason.CANCELLED
                    break

                cycle += 1
                logger.debug(f"Cycle {cycle}: GET {redact_url(url)}")
                page = await self._fetch_page(url)
                if page is None:
                    reason = StopReason.CANCELLED
                    break

                await stream._deliver(page)

                url = page.next_url
                if not url:
                    reason = StopReason.EXHAUSTED
                    break
        except UpcomingMoviesError as e:
            error = e
            logger.warning(f"Pagination interrompue au cycle {cycle}: {e}")
        except asyncio.CancelledError:
            reason = StopReason.CANCELLED
            raise
        except Exception as e:
            error = PaginationError(f"cycle {cycle}: {e!r}")
            error.__cause__ = e
            logger.error(f"Erreur inattendue au cycle {cycle}: {e!r}")
        finally:
            self._state = PaginatorState.STOPPED
            stream._finish(reason, error)
            logger.info(f"Pagination terminee ({reason.value}) apres {cycle} cycle(s)")

    async def _fetch_page(self, url: str) -> Optional[UpcomingMoviesPage]:
        """Execute la requete d'un cycle. Retourne None si elle a ete interrompue."""
        if not self._interrupt_fetch or self._cancel is None:
            return await self._fetch(url)

        fetch_task = asyncio.ensure_future(self._fetch(url))
        cancel_task = asyncio.ensure_future(self._cancel.wait())
        try:
            done, _ = await asyncio.wait(
                {fetch_task, cancel_task}, return_when=asyncio.FIRST_COMPLETED
            )
        finally:
            for task in (fetch_task, cancel_task):
                if not task.done():
                    task.cancel()

        if fetch_task in done:
            return fetch_task.result()

        await asyncio.wait([fetch_task])
        logger.debug(f"Requete interrompue par annulation: {redact_url(url)}")
        return None

    async def _fetch(self, url: str) -> UpcomingMoviesPage:
        try:
            response = await request_with_retry(
                self._client,
                "GET",
                url,
                max_attempts=self._max_attempts,
                max_wait=self._max_wait,
            )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise TransportError(f"GET {redact_url(url)}: {e!r}", url=url) from e

        return await parse_upcoming_movies_response(response)
