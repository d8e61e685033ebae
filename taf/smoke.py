#!/usr/bin/env python3
"""CRUD smoke runner against a live placeholder API.

Steps per resource kind:
- create a resource and check it got an id
- read it back and compare
- update it and read it back again
- list the collection and look for the updated entry

A compact summary is logged and the exit code is 0 only if every step passed.
"""
from __future__ import annotations

import sys
import time
from collections.abc import Callable, Iterable
from dataclasses import asdict, dataclass, replace

from .cli import parse_args
from .config import TransportConfig
from .endpoint import ResourceEndpoint, ResourceKind
from .logging_conf import get_logger, setup_logging
from .resources import COMMENTS, KINDS, USERS, CommentDto, UserDto
from .status import HttpStatus
from .transport import HttpTransport
from .types import SmokeError, TafError, TransportError


@dataclass
class StepResult:
    """Outcome of a single smoke step."""

    resource: str
    step: str
    ok: bool
    error: str | None = None


# Payload builders: the initial value and the update applied to it.
_SAMPLES: dict[str, tuple[Callable[[], object], Callable[[object], object]]] = {
    COMMENTS.name: (
        lambda: CommentDto(content="Hello"),
        lambda created: CommentDto(content="Updated"),
    ),
    USERS.name: (
        lambda: UserDto(name="John Doe", email="john.doe@example.com"),
        lambda created: UserDto(name="Jane Doe", email=created.email),
    ),
}


def wait_for_health(transport: HttpTransport, path: str, timeout_s: float = 20.0) -> None:
    """Poll `path` until it answers 200 or raise after a timeout."""
    deadline = time.monotonic() + timeout_s
    while time.monotonic() < deadline:
        try:
            r = transport.request("GET", path)
            if r.status_code == HttpStatus.OK:
                transport.logger.info("health.ok", extra={"event": "health_ok"})
                return
        except TransportError:
            pass  # server not up yet
        time.sleep(0.25)
    raise SmokeError(f"{path} did not answer 200 within {timeout_s}s")


def run_scenario(endpoint: ResourceEndpoint, kind: ResourceKind) -> list[StepResult]:
    """Run create → get → update → get → list for one kind; stop at the first failure."""
    make, change = _SAMPLES[kind.name]
    results: list[StepResult] = []
    state: dict[str, object] = {}

    def step(name: str, fn: Callable[[], None]) -> bool:
        try:
            fn()
        except (TafError, AssertionError) as e:
            results.append(StepResult(kind.name, name, False, f"{type(e).__name__}: {e}"))
            return False
        results.append(StepResult(kind.name, name, True))
        return True

    def create() -> None:
        created = endpoint.create(make())
        assert created.id, "created resource has no id"
        state["created"] = created

    def read_back() -> None:
        created = state["created"]
        got = endpoint.get_by_id(created.id)
        assert got == created, f"read back {got!r} != created {created!r}"

    def update() -> None:
        created = state["created"]
        wanted = change(created)
        endpoint.update(created.id, wanted)
        got = endpoint.get_by_id(created.id)
        expected = wanted.model_dump(exclude={"id"})
        assert got.model_dump(exclude={"id"}) == expected, f"update not visible: {got!r}"
        state["updated"] = got

    def list_all() -> None:
        updated = state["updated"]
        items = endpoint.get_all()
        assert updated in items, f"{updated!r} missing from list of {len(items)}"

    for name, fn in (("create", create), ("get", read_back), ("update", update), ("list", list_all)):
        if not step(name, fn):
            break
    return results


def summarize(results: Iterable[StepResult]) -> tuple[dict, int]:
    """Compute the summary event and exit code."""
    results = list(results)
    failed = [r for r in results if not r.ok]
    summary = {
        "component": "runner",
        "event": "summary",
        "steps": len(results),
        "passed": len(results) - len(failed),
        "failed": len(failed),
        "failures": [asdict(r) for r in failed],
    }
    exit_code = 0 if results and not failed else 1
    return summary, exit_code


def run_smoke(
    transport: HttpTransport,
    resources: Iterable[str],
    *,
    health_path: str | None = None,
    timeout_s: float = 20.0,
) -> int:
    if health_path:
        wait_for_health(transport, health_path, timeout_s)
    results: list[StepResult] = []
    for name in resources:
        kind = KINDS[name]
        results.extend(run_scenario(ResourceEndpoint(transport, kind), kind))
    summary, exit_code = summarize(results)
    transport.logger.info("runner.summary", extra=summary)
    return exit_code


def main(argv: list[str] | None = None) -> None:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    setup_logging(args.log_level)
    config = TransportConfig.from_env(logger=get_logger("runner"))
    if args.base_url != config.base_url:
        config = replace(config, base_url=args.base_url)
    with HttpTransport(config) as transport:
        code = run_smoke(
            transport,
            args.resources,
            health_path=args.health_path,
            timeout_s=args.timeout,
        )
    raise SystemExit(code)


if __name__ == "__main__":
    main()
