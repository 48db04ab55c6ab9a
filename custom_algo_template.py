from radiuscover.algorithms.base import AlgorithmWrapper


class HubFirstCover(AlgorithmWrapper):
    # Give your algorithm a unique name for the results table
    name = "hub_first"

    def solve(self, index, config) -> dict:
        """
        Implement your covering logic here.

        Parameters:
        - index: DistanceIndex; index[v] lists every vertex within d hops of v
        - config: AnnealingConfig; config.deadline_seconds is your time budget

        Returns:
        - {"solution": {"shops": [...]}, "metadata": {...}}
        """

        # --- Largest-neighbourhood-first greedy ---
        # Visit vertices by how many others they reach, and open a shop at
        # any vertex whose neighbourhood still contains an uncovered vertex.

        order = sorted(range(len(index)), key=lambda v: len(index[v]), reverse=True)
        covered = [False] * len(index)
        shops = []

        for v in order:
            if all(covered[u] for u in index[v]):
                continue
            shops.append(v)
            for u in index[v]:
                covered[u] = True

        return {
            "solution": {"shops": shops},
            "metadata": {"heuristic": "largest neighbourhood first"},
        }
