"""Event builders for common Word Finder events.

Every builder emits balanced postings: each amount is posted once to the
subject account and once, negated, to its counter account, so a trial
balance over a run sums to zero per unit.
"""

from typing import Any, Dict, List, Optional

from .sdk import event


def _balanced(
    account_type: str,
    account_id: str,
    counter_id: str,
    unit: str,
    amount: float,
    dims: Optional[Dict[str, Any]] = None,
) -> List[Dict[str, Any]]:
    return [
        {
            "account_type": account_type,
            "account_id": account_id,
            "unit": unit,
            "delta_numeric": amount,
            "dims": dims,
        },
        {
            "account_type": account_type,
            "account_id": counter_id,
            "unit": unit,
            "delta_numeric": -amount,
            "dims": dims,
        },
    ]


def state_move(
    *,
    task_id: str,
    from_: str,
    to: str,
    project_id: str,
    agent_id: str,
    run_id: Optional[str] = None,
    payload: Optional[Dict[str, Any]] = None,
) -> str:
    """Record a state transition of a task (e.g. NEW -> ACTIVE)."""
    postings = _balanced("truth.state", f"task:{task_id}:{to}", f"task:{task_id}:{from_}", "state", 1)
    return event(
        "state_move",
        {"from": from_, "to": to, **(payload or {})},
        project_id=project_id,
        run_id=run_id,
        task_id=task_id,
        agent_id=agent_id,
        postings=postings,
    )


def round_start(
    *,
    task_id: str,
    project_id: str,
    root_word: str,
    candidate_count: int,
    run_id: Optional[str] = None,
    seed: Optional[int] = None,
) -> str:
    """Record the start of a round and the root word that was drawn."""
    return event(
        "round_start",
        {
            "root_word": root_word,
            "candidate_count": candidate_count,
            "seed": seed,
        },
        project_id=project_id,
        run_id=run_id,
        task_id=task_id,
        agent_id="agent:wordfinder",
    )


def word_submitted(
    *,
    task_id: str,
    project_id: str,
    root_word: str,
    submission: str,
    outcome: str,
    score_delta: int = 0,
    reason: Optional[str] = None,
    wall_ms: Optional[int] = None,
    run_id: Optional[str] = None,
) -> str:
    """Record the verdict on one submission.

    ``outcome`` is "accepted" or "rejected". Time spent evaluating is posted
    to resource.time_ms when ``wall_ms`` is given.
    """
    postings: List[Dict[str, Any]] = []
    if wall_ms is not None:
        postings.extend(
            _balanced("resource.time_ms", "agent:wordfinder", "clock", "ms", wall_ms)
        )
    if score_delta:
        postings.extend(
            _balanced("value.utility", "agent:wordfinder", "house", "points", score_delta)
        )

    payload: Dict[str, Any] = {
        "root_word": root_word,
        "submission": submission,
        "outcome": outcome,
        "score_delta": score_delta,
    }
    if reason is not None:
        payload["reason"] = reason
    if wall_ms is not None:
        payload["wall_ms"] = wall_ms

    return event(
        "word_submitted",
        payload,
        project_id=project_id,
        run_id=run_id,
        task_id=task_id,
        agent_id="agent:wordfinder",
        postings=postings,
    )
