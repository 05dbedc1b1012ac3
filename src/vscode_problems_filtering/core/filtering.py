from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from vscode_problems_filtering.models import Problem


def _fold(value: str, ignore_case: bool) -> str:
    return value.lower() if ignore_case else value


def matches(
    problem: Problem,
    include_terms: Sequence[str],
    exclude_terms: Sequence[str],
    ignore_case: bool = False,
) -> bool:
    """Return True if every include term and no exclude term occurs in the message.

    Matching is literal substring containment. With ``ignore_case`` the
    message and every term are lower-cased before comparing. Empty term
    lists are vacuously satisfied.
    """
    haystack = _fold(problem.message, ignore_case)
    all_included = all(_fold(term, ignore_case) in haystack for term in include_terms)
    none_excluded = not any(_fold(term, ignore_case) in haystack for term in exclude_terms)
    return all_included and none_excluded


@dataclass(frozen=True)
class ProblemFilter:
    """Include/exclude criteria with the needles folded once up front."""

    include_terms: tuple[str, ...] = ()
    exclude_terms: tuple[str, ...] = ()
    ignore_case: bool = False
    _needles_in: tuple[str, ...] = field(init=False, repr=False, compare=False)
    _needles_out: tuple[str, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "include_terms", tuple(self.include_terms))
        object.__setattr__(self, "exclude_terms", tuple(self.exclude_terms))
        object.__setattr__(self, "_needles_in", tuple(_fold(t, self.ignore_case) for t in self.include_terms))
        object.__setattr__(self, "_needles_out", tuple(_fold(t, self.ignore_case) for t in self.exclude_terms))

    @property
    def has_criteria(self) -> bool:
        return bool(self.include_terms or self.exclude_terms)

    def matches(self, problem: Problem) -> bool:
        haystack = _fold(problem.message, self.ignore_case)
        if not all(needle in haystack for needle in self._needles_in):
            return False
        return not any(needle in haystack for needle in self._needles_out)

    def select(self, problems: Iterable[Problem]) -> list[Problem]:
        """Keep matching problems, in their original order."""
        return [p for p in problems if self.matches(p)]
