import abc
from typing import Any, Dict, Generic, TypeVar

T = TypeVar("T")


class ProblemInterface(abc.ABC, Generic[T]):
    """
    Abstract base class defining the capability set a search driver needs
    from a problem: generate, tweak, rank and clone candidates.

    Implementations own their private random generator, so a driver never
    touches shared random state.
    """

    @abc.abstractmethod
    def generate_candidate(self) -> T:
        """
        Produces a fresh, valid initial candidate.

        Returns:
            A new candidate.
        """
        pass

    @abc.abstractmethod
    def tweak_candidate(self, candidate: T) -> T:
        """
        Produces a neighbouring candidate without mutating the input.

        Args:
            candidate: The candidate to move away from.

        Returns:
            A new candidate one local move away.
        """
        pass

    @abc.abstractmethod
    def rank_candidate(self, candidate: T) -> float:
        """
        Scores a candidate for comparison. Higher values are better.

        Args:
            candidate: The candidate to score.

        Returns:
            The rank (float).
        """
        pass

    @abc.abstractmethod
    def clone_candidate(self, candidate: T) -> T:
        """Returns an independent copy of the candidate."""
        pass

    def get_problem_info(self) -> Dict[str, Any]:
        """
        Optional hook returning a dictionary of problem details
        ('dimension', 'problem_type', ...). Defaults to an empty dict.
        """
        return {}
