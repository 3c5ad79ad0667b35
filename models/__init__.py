from models.scenario import Scenario
from models.projection import ProjectionResult, YearProjection
from models.policy import CareerLevel, DeductionPolicy
