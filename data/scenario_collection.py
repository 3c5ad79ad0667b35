"""Scenario collection — CRUD, selection and persistence through a storage port."""

import logging
import uuid
from typing import Callable, Dict, Iterator, List, Optional

from config.defaults import (
    DEFAULT_SCENARIO_ID,
    DEFAULT_SCENARIO_NAME,
    DEFAULT_YEARS,
    SCENARIO_COLORS,
)
from data.storage import ScenarioStorage, StorageError
from models.policy import career_levels, get_career_level
from models.scenario import Scenario

logger = logging.getLogger(__name__)


def pick_color(index: int) -> str:
    return SCENARIO_COLORS[index % len(SCENARIO_COLORS)]


def new_scenario_id() -> str:
    return f"c_{uuid.uuid4().hex[:12]}"


def create_default_scenario(years: int = DEFAULT_YEARS) -> Scenario:
    """The protected 'current' scenario every collection starts from."""
    level = career_levels()[0]
    return Scenario(
        scenario_id=DEFAULT_SCENARIO_ID,
        name=DEFAULT_SCENARIO_NAME,
        color=pick_color(0),
        level_id=level.level_id,
        base_salary=level.base_salary,
        gepi_points=level.gepi_points,
        years=years,
    )


def scenarios_from_records(records: List[dict]) -> List[Scenario]:
    """Rebuild scenarios from stored records. Raises StorageError on bad records."""
    scenarios = []
    seen = set()
    for record in records:
        if not isinstance(record, dict):
            raise StorageError(f"Scenario record is not an object: {record!r}")
        try:
            scenario = Scenario.from_dict(record)
        except TypeError as e:
            raise StorageError(f"Invalid scenario record: {e}") from e
        if scenario.scenario_id in seen:
            raise StorageError(f"Duplicate scenario id: {scenario.scenario_id}")
        seen.add(scenario.scenario_id)
        scenarios.append(scenario)
    return scenarios


class ScenarioCollection:
    """Ordered scenarios keyed by id, with one optional selection."""

    def __init__(
        self,
        storage: Optional[ScenarioStorage] = None,
        id_factory: Callable[[], str] = new_scenario_id,
    ):
        self._storage = storage
        self._id_factory = id_factory
        self._scenarios: Dict[str, Scenario] = {}
        self._selected_id: Optional[str] = None

    # --- Loading / persistence ---

    def load(self) -> "ScenarioCollection":
        """Rehydrate from storage, falling back to the default scenario."""
        records = None
        if self._storage is not None:
            try:
                records = self._storage.load()
                scenarios = scenarios_from_records(records) if records else []
            except StorageError as e:
                logger.warning("Stored scenarios unreadable, using default: %s", e)
                scenarios = []
        else:
            scenarios = []

        if not scenarios:
            scenarios = [create_default_scenario()]
        self._scenarios = {s.scenario_id: s for s in scenarios}
        self._selected_id = scenarios[0].scenario_id
        logger.info("Loaded %d scenario(s)", len(self._scenarios))
        return self

    def _persist(self):
        if self._storage is not None:
            self._storage.save(self.to_records())

    def to_records(self) -> List[dict]:
        return [s.to_dict() for s in self._scenarios.values()]

    # --- Access ---

    @property
    def scenarios(self) -> List[Scenario]:
        return list(self._scenarios.values())

    @property
    def selected_id(self) -> Optional[str]:
        return self._selected_id

    @property
    def active(self) -> Optional[Scenario]:
        """Selected scenario, or the first one when the selection is gone."""
        scenario = self._scenarios.get(self._selected_id)
        if scenario is None and self._scenarios:
            return next(iter(self._scenarios.values()))
        return scenario

    def get(self, scenario_id: str) -> Optional[Scenario]:
        return self._scenarios.get(scenario_id)

    def __len__(self) -> int:
        return len(self._scenarios)

    def __iter__(self) -> Iterator[Scenario]:
        return iter(self.scenarios)

    def __contains__(self, scenario_id) -> bool:
        return scenario_id in self._scenarios

    def _require(self, scenario_id: str) -> Scenario:
        scenario = self._scenarios.get(scenario_id)
        if scenario is None:
            raise ValueError(f"Unknown scenario: {scenario_id}")
        return scenario

    # --- Mutations ---

    def select(self, scenario_id: Optional[str]):
        if scenario_id is not None:
            self._require(scenario_id)
        self._selected_id = scenario_id

    def add(self, global_years: int = DEFAULT_YEARS) -> Scenario:
        """Create a scenario seeded from the first career level and select it."""
        level = career_levels()[0]
        scenario = Scenario(
            scenario_id=self._id_factory(),
            name=f"Scenario {len(self._scenarios) + 1}",
            color=pick_color(len(self._scenarios)),
            level_id=level.level_id,
            base_salary=level.base_salary,
            gepi_points=level.gepi_points,
            years=global_years,
        )
        if scenario.scenario_id in self._scenarios:
            raise ValueError(f"Duplicate scenario id: {scenario.scenario_id}")
        self._scenarios[scenario.scenario_id] = scenario
        self._selected_id = scenario.scenario_id
        self._persist()
        logger.info("Added scenario %s", scenario.scenario_id)
        return scenario

    def update(self, scenario_id: str, **patch) -> Scenario:
        """Merge a partial field set into a scenario."""
        updated = self._require(scenario_id).with_changes(**patch)
        self._scenarios[scenario_id] = updated
        self._persist()
        return updated

    def apply_level(self, scenario_id: str, level_id: str) -> Scenario:
        """Reseed base salary and GEPI points from a career level."""
        level = get_career_level(level_id)
        return self.update(
            scenario_id,
            level_id=level.level_id,
            base_salary=level.base_salary,
            gepi_points=level.gepi_points,
        )

    def remove(self, scenario_id: str) -> bool:
        """Remove a scenario. The protected default scenario is never removed."""
        if scenario_id == DEFAULT_SCENARIO_ID:
            logger.info("Ignoring removal of protected scenario %s", scenario_id)
            return False
        if self._scenarios.pop(scenario_id, None) is None:
            return False
        if self._selected_id == scenario_id:
            self._selected_id = next(iter(self._scenarios), None)
        self._persist()
        logger.info("Removed scenario %s", scenario_id)
        return True

    def replace_all(self, scenarios: List[Scenario]):
        """Swap the whole collection, e.g. after an import."""
        ids = [s.scenario_id for s in scenarios]
        if len(ids) != len(set(ids)):
            raise ValueError("Duplicate scenario ids in import")
        if not scenarios:
            scenarios = [create_default_scenario()]
        self._scenarios = {s.scenario_id: s for s in scenarios}
        if self._selected_id not in self._scenarios:
            self._selected_id = scenarios[0].scenario_id
        self._persist()

    def reset(self, years: int = DEFAULT_YEARS):
        self._scenarios = {}
        self.replace_all([create_default_scenario(years)])
