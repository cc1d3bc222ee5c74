from ..core.search_algorithm import SearchAlgorithm


class HillClimbing(SearchAlgorithm):
    """
    Single-state hill climbing.

    A neighbour replaces the current candidate when it ranks at least as
    high, which lets the search drift across plateaus.
    """
    name = "hill-climbing"

    def step(self):
        neighbor = self.problem.tweak_candidate(self.current)
        neighbor_rank = self.problem.rank_candidate(neighbor)
        if neighbor_rank >= self.current_rank:
            self.current = neighbor
            self.current_rank = neighbor_rank
            self._update_best_solution(neighbor, neighbor_rank)
