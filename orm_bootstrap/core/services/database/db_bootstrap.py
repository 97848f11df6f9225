"""Bootstrap sequence: verify, drop, recreate and seed the declared schemas.

The steps always run in the same order and each one starts only after the
previous one returned. The first failing step stops the sequence; earlier
steps are not compensated and nothing is retried.
"""

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from loguru import logger

from orm_bootstrap.core.services.database.db_manage import DbManageService
from orm_bootstrap.core.services.database.db_session import DbSessionService
from orm_bootstrap.entities import SCHEMAS, EntityTable

SeedRecords = Mapping[str, Sequence[Mapping[str, Any]]]

SEED_RECORDS: dict[str, list[dict[str, Any]]] = {
    "User": [
        {"first_name": "Bob", "last_name": "Doe", "email": "bob@example.com"},
        {"first_name": "Jane", "last_name": "Doe", "email": "jane@example.com"},
    ],
}

STEP_VERIFY = "verify_connection"
STEP_DROP = "drop"
STEP_CREATE = "create"
STEP_SEED = "seed"


class BootstrapError(RuntimeError):
    """A bootstrap step failed; the remaining steps were not run."""

    def __init__(self, step: str, message: str):
        super().__init__(f"Bootstrap step '{step}' failed: {message}")
        self.step = step


@dataclass
class BootstrapStep:
    name: str
    action: Callable[[], None]


@dataclass
class BootstrapResult:
    """Outcome of one run of the bootstrap sequence."""

    schemas: dict[str, type[EntityTable]]
    completed: list[str] = field(default_factory=list)
    failed_step: str | None = None
    error: BaseException | None = None

    @property
    def ok(self) -> bool:
        return self.failed_step is None

    def raise_for_error(self) -> None:
        """Raise a BootstrapError chained to the original failure, if any."""
        if self.failed_step is None:
            return
        if isinstance(self.error, BootstrapError):
            raise self.error
        raise BootstrapError(self.failed_step, str(self.error)) from self.error


class DatabaseBootstrap:
    """Reset and seed the storage behind a set of schemas.

    Args:
        database_service: Connection handle the steps run against.
        schemas: Entity name to table model; these tables are dropped and recreated.
        seeds: Entity name to the records inserted after recreation.
        seed: Whether the seed step is part of the sequence.
    """

    def __init__(
        self,
        database_service: DbSessionService,
        schemas: Mapping[str, type[EntityTable]] = SCHEMAS,
        seeds: SeedRecords = SEED_RECORDS,
        seed: bool = True,
    ):
        self._database_service = database_service
        self._schemas = dict(schemas)
        self._seeds = seeds
        self._seed = seed
        self._manage_service = DbManageService(database_service, self._schemas)

    @property
    def manage_service(self) -> DbManageService:
        return self._manage_service

    def steps(self) -> list[BootstrapStep]:
        steps = [
            BootstrapStep(STEP_VERIFY, self._database_service.verify_connection),
            BootstrapStep(STEP_DROP, self._manage_service.drop_all),
            BootstrapStep(STEP_CREATE, self._manage_service.create_all),
        ]
        if self._seed:
            steps.append(BootstrapStep(STEP_SEED, self.seed_records))
        return steps

    def seed_records(self) -> None:
        """Insert every seed record in a single transaction."""
        unknown = [name for name in self._seeds if name not in self._schemas]
        if unknown:
            raise BootstrapError(STEP_SEED, f"No schema declared for {', '.join(unknown)}")

        for entity_name, records in self._seeds.items():
            declared = set(self._schemas[entity_name].model_fields)
            for record in records:
                undeclared = sorted(set(record) - declared)
                if undeclared:
                    raise BootstrapError(
                        STEP_SEED,
                        f"Undeclared attribute(s) for {entity_name}: {', '.join(undeclared)}",
                    )

        with self._database_service.session_scope() as session:
            for entity_name, records in self._seeds.items():
                table = self._schemas[entity_name]
                for record in records:
                    session.add(table(**record))
                logger.info("Seeded {} {} record(s)", len(records), entity_name)

    def run(self) -> BootstrapResult:
        """Run every step in order, stopping at the first failure."""
        result = BootstrapResult(schemas=dict(self._schemas))

        for step in self.steps():
            logger.info("Bootstrap step '{}' started", step.name)
            try:
                step.action()
            except Exception as e:
                logger.exception("Bootstrap step '{}' failed", step.name)
                result.failed_step = step.name
                result.error = e
                return result
            result.completed.append(step.name)
            logger.info("Bootstrap step '{}' completed", step.name)

        logger.info("Bootstrap completed for schemas: {}", ", ".join(result.schemas))
        return result


def bootstrap_database(
    database_service: DbSessionService,
    schemas: Mapping[str, type[EntityTable]] = SCHEMAS,
    seeds: SeedRecords = SEED_RECORDS,
    seed: bool = True,
) -> dict[str, type[EntityTable]]:
    """Run the bootstrap sequence and return the exported schema handles.

    Raises:
        BootstrapError: If any step fails.
    """
    result = DatabaseBootstrap(database_service, schemas, seeds, seed=seed).run()
    result.raise_for_error()
    return result.schemas
