"""Mediator.

Collaborators never talk to each other; a mediator looks at one and
decides what happens to the other. The middleware pipeline is the same
idea applied to request processing: each stage decides whether the request
reaches the next one.
"""

import itertools
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from gof_patterns.domain.ports import ConsolePort
from gof_patterns.infrastructure.console import get_console
from gof_patterns.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)

_plane_numbers = itertools.count(1)


class Airplane:
    def __init__(self, call_sign: Optional[str] = None):
        self.call_sign = call_sign or f"PLANE-{next(_plane_numbers)}"
        self.landed = False

    def land(self) -> None:
        self.landed = True

    def __str__(self) -> str:
        return self.call_sign


class Runway:
    def __init__(self, name: str, clear: bool = False):
        self.name = name
        self.clear = clear


class Tower:
    """Coordinates runways and airplanes that know nothing of each other."""

    def __init__(self, console: Optional[ConsolePort] = None):
        self._console = console or get_console()

    def clear_for_landing(self, runway: Runway, plane: Airplane) -> bool:
        """
        Decide whether plane may land on runway.

        Returns:
            True when the runway is clear and the plane was told to land
        """
        if runway.clear:
            self._console.write_line(f"Plane {plane} is clear for landing")
            plane.land()
            return True
        self._console.write_line(f"Plane {plane} is NOT clear for landing")
        return False


# === Middleware =================================================================


@dataclass
class Request:
    method: str
    path: str
    headers: Dict[str, str] = field(default_factory=dict)


@dataclass
class Response:
    status_code: int = 200
    body: str = ""
    headers: Dict[str, str] = field(default_factory=dict)


CallNext = Callable[[], Response]
Middleware = Callable[[Request, CallNext], Response]
Endpoint = Callable[[Request], Response]


class MiddlewarePipeline:
    """
    Ordered middleware stages in front of a terminal endpoint.

    A stage receives the request and a ``call_next`` callable; the request
    only reaches the next stage if ``call_next()`` is invoked. Whatever the
    stage returns is the pipeline's response.
    """

    def __init__(self):
        self._middlewares: List[Middleware] = []

    def use(self, middleware: Middleware) -> "MiddlewarePipeline":
        self._middlewares.append(middleware)
        return self

    def handle(self, request: Request, endpoint: Endpoint) -> Response:
        # Snapshot so stages added mid-request do not join it
        middlewares = tuple(self._middlewares)

        def dispatch(index: int) -> Response:
            if index == len(middlewares):
                return endpoint(request)
            return middlewares[index](request, lambda: dispatch(index + 1))

        logger.debug("Dispatching request", method=request.method, path=request.path,
                     stages=len(middlewares))
        return dispatch(0)


def logging_middleware(console: ConsolePort) -> Middleware:
    """Middleware that prints the request method and passes the request on."""

    def middleware(request: Request, call_next: CallNext) -> Response:
        console.write_line(f"Request Type:  {request.method}")
        return call_next()

    return middleware


def hello_world(request: Request) -> Response:
    return Response(status_code=200, body="Hello World")


def run_demo(console: Optional[ConsolePort] = None) -> None:
    """Run the control tower and the middleware pipeline."""
    console = console or get_console()

    runway_25a = Runway("25A", clear=True)
    runway_25b = Runway("25B")
    runway_25c = Runway("25C", clear=True)

    airplane_a = Airplane("A")
    airplane_b = Airplane("B")
    airplane_c = Airplane("C")

    tower = Tower(console)
    tower.clear_for_landing(runway_25a, airplane_a)
    tower.clear_for_landing(runway_25b, airplane_b)
    tower.clear_for_landing(runway_25c, airplane_c)
    console.write_line()

    app = MiddlewarePipeline().use(logging_middleware(console))
    response = app.handle(Request(method="GET", path="/"), hello_world)
    console.write_line(response.body)
