# ruff: noqa: TC002  # Repo and logger types needed at runtime for annotations
"""Reference resolution and hash shortening.

This module resolves reference text (full or abbreviated object ids, ref
names and pseudo-refs such as ``ORIG_HEAD``) against a dulwich repository
and shortens the resulting id to the shortest prefix no other object in the
store shares.

The object set is read on every call. Uniqueness of a prefix depends on the
objects present at that moment, so nothing is cached.
"""

import re
from collections.abc import Iterable

from dulwich.objects import Tag
from dulwich.objectspec import parse_ref
from dulwich.repo import Repo
from structlog.typing import FilteringBoundLogger

from gitprompt._git._common import decode_bytes, get_control_dir
from gitprompt._git._models import ShortHash
from gitprompt.exceptions import AmbiguousReferenceError, MissingReferenceError

FULL_HEX_LENGTH = 40
# git refuses abbreviations shorter than this
MIN_ABBREV_LENGTH = 4
# git's floor for core.abbrev=auto
FALLBACK_ABBREV_LENGTH = 7

_HEX_DIGITS = frozenset("0123456789abcdef")
_ABBREV_DISABLED = frozenset({"no", "false", "off"})
# git's pseudo-ref naming: ORIG_HEAD, FETCH_HEAD, CHERRY_PICK_HEAD...
_PSEUDO_REF = re.compile(r"[A-Z_]*HEAD")
_SYMREF_PREFIX = "ref: "


def is_hex(text: str) -> bool:
    """Check whether text is non-empty lowercase hexadecimal."""
    return bool(text) and all(char in _HEX_DIGITS for char in text)


def clamp_abbrev(length: int) -> int:
    """Clamp an abbreviation length into git's accepted range."""
    return max(MIN_ABBREV_LENGTH, min(length, FULL_HEX_LENGTH))


def auto_abbrev_length(object_count: int) -> int:
    """Compute git's ``core.abbrev=auto`` length for a repository size.

    With roughly 2^n objects a collision is expected around 2^(n/2), and
    each hex digit carries 4 bits, so git uses ceil((msb(count) + 2) / 2)
    digits with a floor of 7.

    Args:
        object_count: Number of objects in the repository.

    Returns:
        The minimum abbreviation length.
    """
    if object_count <= 0:
        return FALLBACK_ABBREV_LENGTH
    bits = (object_count.bit_length() - 1) + 2
    return max(FALLBACK_ABBREV_LENGTH, (bits + 1) // 2)


def _common_prefix_length(left: str, right: str) -> int:
    length = 0
    for a, b in zip(left, right, strict=False):
        if a != b:
            break
        length += 1
    return length


def shortest_unique_prefix(
    object_id: str,
    object_ids: Iterable[str],
    *,
    min_length: int = MIN_ABBREV_LENGTH,
) -> str:
    """Return the shortest prefix of object_id that no other id shares.

    Args:
        object_id: Full hex id to shorten.
        object_ids: All ids currently known. May include object_id itself.
        min_length: Shortest prefix to return even when a shorter one is
            already unique.

    Returns:
        The prefix, at most the full id.
    """
    shared = 0
    for other in object_ids:
        if other != object_id:
            shared = max(shared, _common_prefix_length(object_id, other))
    return object_id[: min(max(shared + 1, min_length), len(object_id))]


def match_prefix(prefix: str, object_ids: Iterable[str]) -> list[str]:
    """Return the sorted ids starting with prefix."""
    return sorted(oid for oid in object_ids if oid.startswith(prefix))


def read_core_abbrev(repo: Repo) -> int | None:
    """Read ``core.abbrev`` from the repository's config stack.

    Args:
        repo: The repository instance.

    Returns:
        A fixed minimum length, or None for git's automatic sizing (the
        setting is unset, ``auto`` or unparseable).
    """
    try:
        raw = repo.get_config_stack().get((b"core",), b"abbrev")
    except KeyError:
        return None

    value = decode_bytes(raw).strip().lower()
    if value in _ABBREV_DISABLED:
        return FULL_HEX_LENGTH
    try:
        return clamp_abbrev(int(value))
    except ValueError:
        return None


class HashResolver:
    """Resolve references to their shortest unambiguous object id prefix.

    Lookup order follows ``git rev-parse``: a full object id first, then ref
    names (``HEAD``, ``main``, ``refs/tags/v1``...), then hex prefixes of at
    least four digits. Annotated tags are peeled to the object they point at.

    Args:
        repo: The repository to resolve against. Only read, never written.
        min_length: Fixed minimum prefix length. None follows the
            repository's ``core.abbrev`` setting.
        logger: Optional logger for diagnostics.
    """

    def __init__(
        self,
        repo: Repo,
        *,
        min_length: int | None = None,
        logger: FilteringBoundLogger | None = None,
    ) -> None:
        self._repo: Repo = repo
        self._min_length: int | None = (
            clamp_abbrev(min_length) if min_length is not None else None
        )
        self._logger: FilteringBoundLogger | None = logger

    def resolve(self, text: str) -> ShortHash:
        """Resolve reference text to a ShortHash.

        Args:
            text: Reference text. Surrounding whitespace is ignored.

        Returns:
            The shortest unique prefix together with the full object id.

        Raises:
            MissingReferenceError: If nothing matches.
            AmbiguousReferenceError: If a hex prefix matches several objects.
        """
        reference = text.strip()
        if not reference:
            msg = "Empty reference"
            raise MissingReferenceError(msg, reference=text)

        object_ids = self.object_ids()
        object_id = self._peel(self._lookup(reference, object_ids), reference)
        min_length = self.min_length(len(object_ids))
        prefix = shortest_unique_prefix(object_id, object_ids, min_length=min_length)

        if self._logger is not None:
            self._logger.debug(
                "reference_resolved",
                reference=reference,
                object_id=object_id,
                prefix=prefix,
            )
        return ShortHash(prefix=prefix, object_id=object_id)

    def object_ids(self) -> frozenset[str]:
        """Read the hex ids of every object currently in the store."""
        return frozenset(decode_bytes(sha) for sha in self._repo.object_store)

    def min_length(self, object_count: int) -> int:
        """Minimum prefix length for a store holding object_count objects."""
        if self._min_length is not None:
            return self._min_length
        configured = read_core_abbrev(self._repo)
        if configured is not None:
            return configured
        return auto_abbrev_length(object_count)

    def _lookup(self, reference: str, object_ids: frozenset[str]) -> str:
        candidate = reference.lower()
        if len(candidate) == FULL_HEX_LENGTH and candidate in object_ids:
            return candidate

        ref_target = self._lookup_ref(reference)
        if ref_target is not None:
            return ref_target

        if len(candidate) >= MIN_ABBREV_LENGTH and is_hex(candidate):
            matches = match_prefix(candidate, object_ids)
            if len(matches) == 1:
                return matches[0]
            if matches:
                msg = f"Short object id {reference} is ambiguous"
                raise AmbiguousReferenceError(
                    msg, reference=reference, candidates=tuple(matches)
                )

        msg = f"Reference {reference} does not name any object"
        raise MissingReferenceError(msg, reference=reference)

    def _lookup_ref(self, reference: str) -> str | None:
        refs = self._repo.refs
        try:
            ref_name = parse_ref(refs, reference.encode())
            return decode_bytes(refs[ref_name])
        except KeyError:
            # Unknown name, or a symbolic ref to an unborn branch
            return self._lookup_pseudo_ref(reference)

    def _lookup_pseudo_ref(self, reference: str) -> str | None:
        """Read a pseudo-ref such as ORIG_HEAD straight from its file.

        Recent dulwich releases do not list pseudo-refs among the refs.
        Only the first token counts, which covers FETCH_HEAD's extra columns.
        """
        if reference == "HEAD" or not _PSEUDO_REF.fullmatch(reference):
            return None
        try:
            content = (get_control_dir(self._repo) / reference).read_text(
                encoding="utf-8"
            )
        except (OSError, UnicodeDecodeError):
            return None

        if content.startswith(_SYMREF_PREFIX):
            target = content[len(_SYMREF_PREFIX) :].strip()
            return self._lookup_ref(target) if target.startswith("refs/") else None
        tokens = content.split()
        if not tokens:
            return None
        object_id = tokens[0].lower()
        if len(object_id) == FULL_HEX_LENGTH and is_hex(object_id):
            return object_id
        return None

    def _peel(self, object_id: str, reference: str) -> str:
        store = self._repo.object_store
        try:
            obj = store[object_id.encode()]
            while isinstance(obj, Tag):
                _, target = obj.object
                obj = store[target]
        except KeyError as e:
            msg = f"Reference {reference} points at missing object {object_id}"
            raise MissingReferenceError(msg, reference=reference) from e
        return decode_bytes(obj.id)
