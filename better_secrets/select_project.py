"""Logic for choosing one project when several are found."""

from dataclasses import dataclass

from better_secrets.project_candidate import ProjectCandidate


@dataclass(frozen=True)
class ProjectSelection:
    """The chosen project path and the candidates it was chosen from."""

    path: str
    candidates: tuple[ProjectCandidate, ...]

    @property
    def is_ambiguous(self) -> bool:
        """True when more than one candidate competed for selection."""
        return len(self.candidates) > 1

    @property
    def candidate_paths(self) -> list[str]:
        """Paths of every candidate, in input order."""
        return [c.path for c in self.candidates]

    def warning(self) -> str | None:
        """Describe the disambiguation, or None when there was nothing to choose."""
        if not self.is_ambiguous:
            return None
        listed = ", ".join(self.candidate_paths)
        return f"Multiple .NET projects found ({listed}). Using: '{self.path}'."


def _rank(candidate: ProjectCandidate) -> tuple[bool, bool]:
    """Sort key: root-level first, then web SDK first."""
    return (not candidate.is_at_root, not candidate.is_web_variant)


def select_project(candidates: list[ProjectCandidate]) -> ProjectSelection | None:
    """Pick exactly one project, or None if there are no candidates.

    Ties beyond the root/web ranking keep input order.
    """
    if not candidates:
        return None
    winner = min(candidates, key=_rank)
    return ProjectSelection(path=winner.path, candidates=tuple(candidates))
