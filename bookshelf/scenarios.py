"""
Runner for the pattern demonstration scenarios.

Each scenario drives one pattern against a `Library` while a recorder is
subscribed to the library's hub; the recorded notifications are the result.

Usage (example from CLI):
    from bookshelf.scenarios import run_scenarios

    results = run_scenarios(["builder", "proxy"])
    print(results)
"""

from __future__ import annotations

from typing import Callable, Dict, Iterable, List, NamedTuple, Optional

from bookshelf.catalog.auth import allow_all, deny_all
from bookshelf.domain.builder import build_record
from bookshelf.infrastructure.notifications import NotificationRecorder
from bookshelf.library import Library, get_library, peek_library
from bookshelf.utils.logging import get_logger

log = get_logger(__name__)

SAMPLE_TITLE = "Ion"
SAMPLE_AUTHOR = "Liviu Rebreanu"
SAMPLE_YEAR = 1920


class Scenario(NamedTuple):
    description: str
    run: Callable[[Library], None]


def _builder_scenario(library: Library) -> None:
    builder = (
        library.builder()
        .set_title(SAMPLE_TITLE)
        .set_author(SAMPLE_AUTHOR)
        .set_year(SAMPLE_YEAR)
    )
    first = builder.build()
    second = builder.build()
    log.info("Builder produced equal records: %s", first == second)
    library.repository.add(first)


def _adapter_scenario(library: Library) -> None:
    adapter = library.adapter()
    adapter.add_book(SAMPLE_TITLE, SAMPLE_AUTHOR, SAMPLE_YEAR)
    adapter.remove_book(SAMPLE_TITLE)


def _decorator_scenario(library: Library) -> None:
    record = build_record(SAMPLE_TITLE, SAMPLE_AUTHOR, SAMPLE_YEAR)
    library.decorated().add(record)


def _facade_scenario(library: Library) -> None:
    facade = library.facade()
    facade.add_book(SAMPLE_TITLE, SAMPLE_AUTHOR, SAMPLE_YEAR)
    facade.remove_book(SAMPLE_TITLE)


def _proxy_scenario(library: Library) -> None:
    record = build_record(SAMPLE_TITLE, SAMPLE_AUTHOR, SAMPLE_YEAR)
    library.proxy(authorize=allow_all).add(record)
    library.proxy(authorize=deny_all).add(record)


def _singleton_scenario(library: Library) -> None:
    # An injected library is not the shared one; leave the accessor untouched.
    if peek_library() is library:
        first, second = get_library(), get_library()
        log.info("Shared accessor returns one instance: %s", first is second)
    else:
        log.info("Running against an injected library; shared accessor not used")
    library.facade().add_book(SAMPLE_TITLE, SAMPLE_AUTHOR, SAMPLE_YEAR)


def _scenario_registry() -> Dict[str, Scenario]:
    """Registry of available scenarios."""
    return {
        "builder": Scenario("Fluent builder, two builds from one builder", _builder_scenario),
        "adapter": Scenario("Raw fields adapted to records; title-only removal", _adapter_scenario),
        "decorator": Scenario("Field details reported before the add", _decorator_scenario),
        "facade": Scenario("Builder and repository behind two calls", _facade_scenario),
        "proxy": Scenario("Add allowed, then denied, by the authorizer", _proxy_scenario),
        "singleton": Scenario("Shared accessor identity, skipped when injected", _singleton_scenario),
    }


def available_scenarios() -> List[str]:
    """List available scenario names."""
    return sorted(_scenario_registry().keys())


def _resolve_scenario(name: str) -> Scenario:
    registry = _scenario_registry()
    if name not in registry:
        raise ValueError(f"Unknown scenario '{name}'. Available: {', '.join(sorted(registry))}")
    return registry[name]


def _execute(name: str, scenario: Scenario, library: Library) -> dict:
    recorder = NotificationRecorder()
    result: dict = {"scenario": name, "description": scenario.description}
    log.info(f"[SCENARIO START] {name}", extra={"scenario": name})
    with library.hub.subscribed(recorder):
        try:
            scenario.run(library)
            log.info(
                f"[SCENARIO SUCCESS] {name}",
                extra={"scenario": name, "count": len(recorder.notifications)},
            )
        except Exception as exc:  # noqa: BLE001 - record the failure, keep running the rest
            log.exception(f"[SCENARIO FAILED] {name}", extra={"scenario": name})
            result["error"] = str(exc)

    result["notifications"] = recorder.rendered(library.locale)
    result["kinds"] = [kind.value for kind in recorder.kinds]
    result["count"] = len(recorder.notifications)
    return result


def run_scenarios(
    names: Optional[Iterable[str]] = None,
    library: Optional[Library] = None,
) -> List[dict]:
    """
    Run one or more scenarios and collect their notifications.

    Parameters
    ----------
    names : iterable[str] | None
        Scenario names to run. If None or ["all"], runs all available.
    library : Library | None
        Library to run against. Defaults to the shared `get_library()`.

    Returns
    -------
    List[dict]
        One result per scenario with its rendered notifications and kinds.
    """
    selected = list(names) if names is not None else ["all"]
    if len(selected) == 1 and selected[0] == "all":
        selected = available_scenarios()

    # Fail before running anything if a name is unknown.
    scenarios = [(name, _resolve_scenario(name)) for name in selected]
    target = library if library is not None else get_library()

    results: List[dict] = []
    for name, scenario in scenarios:
        results.append(_execute(name, scenario, target))

    log.info(
        f"[RUN COMPLETE] {len(results)} scenario(s) executed",
        extra={"scenarios": selected},
    )
    return results


__all__ = [
    "Scenario",
    "available_scenarios",
    "run_scenarios",
]
