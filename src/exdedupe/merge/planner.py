"""Compute rename plans for manual merges, auto-merges and single renames."""

from collections import Counter
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import replace

from exdedupe.clustering.models import Cluster
from exdedupe.errors import EmptySelectionError, InvalidInputError, SimilarNameError
from exdedupe.merge.models import DEFAULT_AUTO_MERGE_THRESHOLD, MergeSummary, Rename
from exdedupe.models import NameRecord
from exdedupe.normalize import autocorrect
from exdedupe.validation import DEFAULT_WARN_THRESHOLD, Rejected, Warned, validate

__all__ = [
    "plan_merge",
    "plan_auto_merge",
    "plan_rename",
    "apply_plan",
    "summarize_plan",
]


def plan_merge(selected: Sequence[NameRecord], target_name: str) -> list[Rename]:
    """Plan renaming every selected record to one target name.

    Only the records passed in are included; nothing is pulled in from
    the cluster they came from.

    Parameters
    ----------
    selected : Sequence[NameRecord]
        Records the user ticked for merging.
    target_name : str
        Name to merge into, written as given. It must not be blank after
        trimming.

    Returns
    -------
    list[Rename]
        One rename per selected record, in selection order.

    Raises
    ------
    EmptySelectionError
        If no record is selected or the target is blank.
    """
    if not selected:
        raise EmptySelectionError("No records selected for merge")

    if not target_name.strip():
        raise EmptySelectionError("Merge target name is blank")

    return [Rename(record=record, new_name=target_name) for record in selected]


def plan_auto_merge(
    clusters: Iterable[Cluster],
    auto_threshold: float = DEFAULT_AUTO_MERGE_THRESHOLD,
) -> list[Rename]:
    """Plan renames that are safe without human confirmation.

    Within each cluster, members scoring strictly above ``auto_threshold``
    are renamed to the main record's name. The main record is never
    renamed, and lower-scoring members are left for review. Members that
    already carry the main record's name stay in the plan as no-ops.

    Parameters
    ----------
    clusters : Iterable[Cluster]
        Output of ``build_clusters``.
    auto_threshold : float, optional
        Strict lower bound on similarity, by default 0.9.

    Returns
    -------
    list[Rename]
        Renames in cluster order, then member order.
    """
    plan: list[Rename] = []
    for cluster in clusters:
        target = cluster.main.name
        for member in cluster.similar:
            if member.similarity <= auto_threshold:
                continue
            plan.append(Rename(record=member.record, new_name=target))
    return plan


def plan_rename(
    record: NameRecord,
    new_name: str,
    existing: Sequence[NameRecord],
    *,
    threshold_warn: float = DEFAULT_WARN_THRESHOLD,
    corrections: Mapping[str, str] | None = None,
) -> Rename:
    """Plan renaming a single record after checking the new name.

    The new name is validated against every other record. A close match
    blocks the rename so the user merges instead; otherwise the name is
    auto-corrected before it is planned.

    Parameters
    ----------
    record : NameRecord
        Record being renamed.
    new_name : str
        Name typed by the user.
    existing : Sequence[NameRecord]
        Current snapshot. ``record`` itself is excluded by rid.
    threshold_warn : float, optional
        Similarity that blocks the rename, by default 0.7.
    corrections : Mapping[str, str] | None, optional
        Correction table, by default the built-in one.

    Returns
    -------
    Rename
        The planned rename.

    Raises
    ------
    InvalidInputError
        If the new name is blank or too short.
    SimilarNameError
        If a similar name already exists.
    """
    others = [other for other in existing if other.rid != record.rid]
    result = validate(new_name, others, threshold_warn=threshold_warn)

    if isinstance(result, Rejected):
        raise InvalidInputError(result.reason, name=new_name)

    if isinstance(result, Warned):
        closest = result.suggestions[0].original
        raise SimilarNameError(
            f'Similar exercise "{closest}" already exists. Consider merging instead.',
            suggestions=result.suggestions,
        )

    return Rename(record=record, new_name=autocorrect(new_name.strip(), corrections))


def apply_plan(records: Sequence[NameRecord], plan: Iterable[Rename]) -> list[NameRecord]:
    """Return a copy of the snapshot with the plan's renames applied.

    Records are matched by rid. Applying the same plan twice gives the
    same result.

    Parameters
    ----------
    records : Sequence[NameRecord]
        Snapshot the plan was computed from.
    plan : Iterable[Rename]
        Renames to apply.

    Returns
    -------
    list[NameRecord]
        New records in the original order.
    """
    new_names = {rename.record.rid: rename.new_name for rename in plan}
    return [
        replace(record, name=new_names[record.rid]) if record.rid in new_names else record
        for record in records
    ]


def summarize_plan(plan: Sequence[Rename]) -> MergeSummary:
    """Count renames per target name."""
    targets = Counter(rename.new_name for rename in plan)
    return MergeSummary(
        renames=len(plan),
        targets=dict(targets),
        noops=sum(1 for rename in plan if rename.is_noop),
    )
