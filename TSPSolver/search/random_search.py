from ..core.search_algorithm import SearchAlgorithm


class RandomSearch(SearchAlgorithm):
    """Samples independent fresh candidates and keeps the best one seen."""
    name = "random-search"

    def step(self):
        candidate = self.problem.generate_candidate()
        rank = self.problem.rank_candidate(candidate)
        self.current = candidate
        self.current_rank = rank
        self._update_best_solution(candidate, rank)
