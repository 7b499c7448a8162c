import logging
import random
from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional, Tuple, Union

from maze_engine.core.errors import AlreadyStarted, NotStarted
from maze_engine.core.grid import Grid, GridView

logger = logging.getLogger(__name__)


class GeneratorState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    COMPLETE = "complete"


class StepAction(Enum):
    NONE = "none"
    CARVE = "carve"
    BACKTRACK = "backtrack"


class Generator(ABC):
    """
    Steppable maze generator bound to a single Grid.

    Call order is start() once, then step() until is_complete(). step() and
    run_to_completion() raise NotStarted before start(); start() raises
    AlreadyStarted until reset() is called. Once complete, step() is a no-op.
    """

    def __init__(self, grid: Union[Grid, int], seed: Optional[int] = None, rng: Optional[random.Random] = None):
        # A bare size builds and binds a fresh Grid
        self.grid = grid if isinstance(grid, Grid) else Grid(grid)
        if seed is not None and rng is not None:
            raise ValueError("Pass either seed or rng, not both")
        self.seed = seed
        self.rng = rng if rng is not None else random.Random(seed)
        self.state = GeneratorState.IDLE
        self.last_action = StepAction.NONE
        self.step_count = 0
        self.carve_count = 0

    def view(self) -> GridView:
        return self.grid.view()

    def start(self):
        if self.state is not GeneratorState.IDLE:
            raise AlreadyStarted()
        self._start()
        self.state = GeneratorState.RUNNING
        logger.debug("Started %s on %dx%d grid", type(self).__name__, self.grid.size, self.grid.size)

    def step(self) -> GridView:
        if self.state is GeneratorState.IDLE:
            raise NotStarted("step")
        if self.state is GeneratorState.COMPLETE:
            self.last_action = StepAction.NONE
            return self.view()

        self.last_action = self._step()
        self.step_count += 1
        if self.last_action is StepAction.CARVE:
            self.carve_count += 1

        if self._finished():
            self.state = GeneratorState.COMPLETE
            logger.debug("Generation complete after %d steps (%d carves)", self.step_count, self.carve_count)
        return self.view()

    def run_to_completion(self) -> GridView:
        if self.state is GeneratorState.IDLE:
            raise NotStarted("run_to_completion")
        while self.state is GeneratorState.RUNNING:
            self.step()
        return self.view()

    def generate(self) -> GridView:
        """Helper to start and run the generator to completion."""
        self.start()
        return self.run_to_completion()

    def is_complete(self) -> bool:
        return self.state is GeneratorState.COMPLETE

    def reset(self):
        self.grid.reset()
        self._reset()
        self.state = GeneratorState.IDLE
        self.last_action = StepAction.NONE
        self.step_count = 0
        self.carve_count = 0
        logger.debug("Reset %s", type(self).__name__)

    def stack_cells(self) -> Tuple[Tuple[int, int], ...]:
        """(x, y) of the cells on the active path, if the algorithm keeps one."""
        return ()

    @abstractmethod
    def _start(self):
        pass

    @abstractmethod
    def _step(self) -> StepAction:
        """
        Performs one atomic unit of work and reports which one it was.
        Only called while RUNNING.
        """
        pass

    @abstractmethod
    def _finished(self) -> bool:
        pass

    @abstractmethod
    def _reset(self):
        pass
