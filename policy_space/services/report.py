"""Narrative summary of the coalition ranking."""

from policy_space.models import CoalitionBucket


class ReportService:
    """Turns the ranked coalition table into prose."""

    def narrative(self, ranking: list[CoalitionBucket], threshold: int) -> str:
        if not ranking:
            return (
                f"No coalition holding at least {threshold} seats shares common ground "
                "anywhere in the sampled policy space."
            )

        top = ranking[0]
        text = (
            f"The most viable majority coalition is {self._name(top)} with {top.seats} seats: "
            f"all its members accept {top.percent:.1f}% of the policy space."
        )
        if len(ranking) > 1:
            runner_up = ranking[1]
            text += (
                f" The runner-up is {self._name(runner_up)} with {runner_up.seats} seats, "
                f"covering {runner_up.percent:.1f}%."
            )
        return text

    @staticmethod
    def _name(bucket: CoalitionBucket) -> str:
        return " + ".join(bucket.members)
