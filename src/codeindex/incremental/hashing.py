import hashlib
import json
from typing import Iterable

from codeindex.schemas import ElementSpec


def content_hash(elements: Iterable[ElementSpec]) -> str:
    """
    SHA-256 digest of a file's element set.

    Elements are serialized sorted by name, so the digest does not depend on
    the order the caller listed them in.
    """
    payload = [
        [spec.element_type, spec.name, spec.content]
        for spec in sorted(elements, key=lambda spec: (spec.name, spec.element_type))
    ]
    serialized = json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
    return hashlib.sha256(serialized.encode("utf-8", errors="replace")).hexdigest()
