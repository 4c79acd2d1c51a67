"""Audited duplicate review over one snapshot.

Stages:
    stage1_cluster:    group near-duplicate names for human review
    stage2_auto_merge: plan renames that are safe without confirmation

Outputs in ``config.output_dir``:
    clusters.jsonl, auto_merge_plan.jsonl, reports/review_summary.json,
    events.jsonl, run.json

Nothing here writes to the record store; the plan is handed back to the
caller, who applies it.
"""

import json
from collections.abc import Sequence
from pathlib import Path

from exdedupe.api import write_jsonl
from exdedupe.audit import ReviewThresholds, RunContext, RunStatus
from exdedupe.clustering import Cluster, build_clusters, summarize_clusters
from exdedupe.engine.config import EngineConfig, ReviewResult
from exdedupe.merge import Rename, plan_auto_merge, summarize_plan
from exdedupe.models import NameRecord

STAGE_CLUSTER = "stage1_cluster"
STAGE_AUTO_MERGE = "stage2_auto_merge"


def _stage_cluster(
    records: Sequence[NameRecord],
    config: EngineConfig,
    run: RunContext,
) -> list[Cluster]:
    with run.stage(STAGE_CLUSTER, expected=len(records)) as counters:
        clusters = build_clusters(records, threshold=config.cluster_threshold)
        for cluster in clusters:
            run.audit_logger.cluster_found(cluster)

        path = run.output_dir / "clusters.jsonl"
        lines = write_jsonl(clusters, path)
        run.manifest_writer.add_artifact(path, lines=lines)

        summary = summarize_clusters(clusters, total_records=len(records))
        run.manifest_writer.update_counts(
            clusters=summary.clusters,
            records_in_clusters=summary.records_in_clusters,
            singletons=summary.singletons,
        )
        counters["records_in"] = len(records)
        counters["clusters"] = summary.clusters
    return clusters


def _stage_auto_merge(
    clusters: list[Cluster],
    config: EngineConfig,
    run: RunContext,
) -> list[Rename]:
    with run.stage(STAGE_AUTO_MERGE, expected=len(clusters)) as counters:
        plan = plan_auto_merge(clusters, auto_threshold=config.auto_merge_threshold)
        for rename in plan:
            run.audit_logger.rename_planned(rename)

        path = run.output_dir / "auto_merge_plan.jsonl"
        lines = write_jsonl(plan, path)
        run.manifest_writer.add_artifact(path, lines=lines)

        summary = summarize_plan(plan)
        run.manifest_writer.update_counts(
            renames_planned=summary.renames,
            noop_renames=summary.noops,
        )
        counters["clusters_in"] = len(clusters)
        counters["renames"] = summary.renames
    return plan


def _write_summary(
    records: Sequence[NameRecord],
    clusters: list[Cluster],
    plan: list[Rename],
    config: EngineConfig,
    run: RunContext,
) -> Path:
    path = run.output_dir / "reports" / "review_summary.json"
    summary = {
        "clusters": summarize_clusters(clusters, total_records=len(records)).to_dict(),
        "auto_merge": summarize_plan(plan).to_dict(),
        "config": config.to_dict(),
    }
    with path.open("w", encoding="utf-8") as f:
        json.dump(summary, f, indent=2, ensure_ascii=False, sort_keys=True)
        f.write("\n")
    run.manifest_writer.add_artifact(path)
    return path


def run_review(
    records: Sequence[NameRecord],
    config: EngineConfig | None = None,
    command_argv: list[str] | None = None,
) -> ReviewResult:
    """Cluster a snapshot and plan its safe auto-merges, with an audit trail.

    Parameters
    ----------
    records : Sequence[NameRecord]
        Full snapshot, in store order.
    config : EngineConfig | None, optional
        Engine configuration. If None, uses defaults.
    command_argv : list[str] | None, optional
        Invocation recorded in the manifest, ``sys.argv`` if None.

    Returns
    -------
    ReviewResult
        Counts and output paths. On failure ``success`` is False and the
        error is recorded in events.jsonl and run.json.

    Examples
    --------
        >>> from exdedupe.engine import EngineConfig, run_review
        >>> result = run_review(records, EngineConfig(output_dir=Path("review")))
        >>> result.total_clusters
        3
    """
    if config is None:
        config = EngineConfig()

    thresholds = ReviewThresholds(
        warn=config.warn_threshold,
        cluster=config.cluster_threshold,
        auto_merge=config.auto_merge_threshold,
    )
    run = RunContext.start(
        output_dir=config.output_dir,
        thresholds=thresholds,
        records_in=len(records),
        command_argv=command_argv,
    )
    result = ReviewResult(success=False, total_records=len(records))

    try:
        clusters = _stage_cluster(records, config, run)
        plan = _stage_auto_merge(clusters, config, run)
        summary_path = _write_summary(records, clusters, plan, config, run)
    except Exception as e:
        run.record_error(e, include_traceback=True)
        run.finish(RunStatus.FAILED)
        result.error_message = f"{type(e).__name__}: {e}"
        return result

    run.finish(RunStatus.SUCCESS)

    summary = summarize_clusters(clusters, total_records=len(records))
    result.success = True
    result.total_clusters = summary.clusters
    result.records_in_clusters = summary.records_in_clusters
    result.auto_merge_renames = len(plan)
    result.output_files = {
        "clusters": str(run.output_dir / "clusters.jsonl"),
        "auto_merge_plan": str(run.output_dir / "auto_merge_plan.jsonl"),
        "review_summary": str(summary_path),
        "events": str(run.audit_logger.log_path),
        "manifest": str(run.manifest_writer.manifest_path),
    }
    return result
