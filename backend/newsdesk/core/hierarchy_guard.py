"""Hierarchy Enforcement — keeps the category forest acyclic and its parent links valid.

Invariants:
    - All functions are PURE: they read a CategoryArena snapshot (id -> parent id), no IO
    - Raise a NewsdeskError subclass on violation, return None on success
    - Every walk is bounded by len(arena): N categories => at most N parent lookups
    - Update checks run in order: self-parent, cycle, parent existence; first error wins

Design Decisions:
    - Arena keyed by id with the parent stored as a key, not a pointer: a corrupted
      (cyclic) snapshot cannot trap the walk
    - Same ancestor/descendant walks back the cycle check and the descendants listing
"""

from collections import deque
from collections.abc import Iterator

from newsdesk.core.domain_types import CategoryArena, GuardViolation
from newsdesk.core.errors import ErrorContext, InvalidOperationError, ResourceNotFoundError


def iter_ancestors(arena: CategoryArena, start_id: int) -> Iterator[int]:
    """Yield start_id, its parent, grandparent, ... up to a root.

    Stops at a node with no parent or a node missing from the arena. Raises
    InvalidOperationError(CYCLE) if the chain is longer than the arena itself,
    which only happens when the snapshot already contains a cycle.
    """
    limit = len(arena) + 1
    current: int | None = start_id
    steps = 0
    while current is not None:
        if steps == limit:
            raise InvalidOperationError(
                GuardViolation.CYCLE,
                ErrorContext(entity="Category", entity_id=start_id),
            )
        yield current
        steps += 1
        current = arena.get(current)


def check_parent_exists(arena: CategoryArena, parent_id: int | None) -> None:
    """A supplied parent must reference an existing category."""
    if parent_id is not None and parent_id not in arena:
        raise ResourceNotFoundError("Parent category", parent_id)


def check_not_self_parent(category_id: int, parent_id: int | None) -> None:
    """A category cannot be its own parent."""
    if parent_id is not None and parent_id == category_id:
        raise InvalidOperationError(
            GuardViolation.SELF_PARENT,
            ErrorContext(entity="Category", entity_id=category_id, field="parent_id"),
        )


def check_no_cycle(arena: CategoryArena, category_id: int, parent_id: int | None) -> None:
    """Re-parenting must not place a category under one of its own descendants."""
    if parent_id is None:
        return
    for ancestor in iter_ancestors(arena, parent_id):
        if ancestor == category_id:
            raise InvalidOperationError(
                GuardViolation.CYCLE,
                ErrorContext(entity="Category", entity_id=category_id, field="parent_id"),
            )


def validate_category_create(arena: CategoryArena, parent_id: int | None) -> None:
    """Create: the optional parent must exist."""
    check_parent_exists(arena, parent_id)


def validate_category_update(
    arena: CategoryArena, category_id: int, parent_id: int | None,
) -> None:
    """Update: self-parent, then cycle, then parent existence. None parent => new root."""
    check_not_self_parent(category_id, parent_id)
    check_no_cycle(arena, category_id, parent_id)
    check_parent_exists(arena, parent_id)


def direct_children(arena: CategoryArena, category_id: int) -> list[int]:
    """Ids whose parent is category_id, ascending."""
    return sorted(cid for cid, pid in arena.items() if pid == category_id)


def collect_descendants(arena: CategoryArena, category_id: int) -> list[int]:
    """All transitive children of category_id, breadth-first (excluding itself)."""
    children: dict[int, list[int]] = {}
    for cid, pid in arena.items():
        if pid is not None:
            children.setdefault(pid, []).append(cid)

    seen = {category_id}
    ordered: list[int] = []
    queue = deque(sorted(children.get(category_id, [])))
    while queue:
        cid = queue.popleft()
        if cid in seen:
            continue
        seen.add(cid)
        ordered.append(cid)
        queue.extend(sorted(children.get(cid, [])))
    return ordered
