"""
Incremental indexer: the only writer of the keyword index, the vector store
and the file registry.

Per-file atomicity: new elements (keywords and embeddings) are fully built
before the writer lock is taken, and the purge-then-insert swap for a file
happens entirely inside the lock. Readers that take the same lock therefore
never see a half-replaced file.
"""

import threading
import time
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Set, Union

from pydantic import ValidationError

from codeindex.exceptions import InvalidElementError
from codeindex.index import InvertedKeywordIndex
from codeindex.logging_config import logger
from codeindex.schemas import CodeElement, ElementSpec, ReindexReport, make_element_id
from codeindex.semantic import EmbeddingGenerator, InMemoryVectorStore
from codeindex.text import extract_keywords, normalize_text
from codeindex.tracing import trace
from .hashing import content_hash

ElementInput = Union[ElementSpec, Mapping[str, Any], Sequence[Any]]


def to_spec(element: ElementInput) -> ElementSpec:
    """
    Accept an ElementSpec, a mapping with element_type/name/content keys, or
    an (element_type, name, content) triple (tuple or list).

    Raises:
        InvalidElementError: If the element cannot be validated
    """
    if isinstance(element, ElementSpec):
        return element
    try:
        if isinstance(element, Sequence) and not isinstance(element, (str, bytes)):
            element_type, name, content = element
            return ElementSpec(element_type=element_type, name=name, content=_as_text(content))
        return ElementSpec(**{**element, "content": _as_text(element.get("content", ""))})
    except (ValidationError, ValueError, TypeError) as e:
        raise InvalidElementError(repr(element)[:80], str(e))


def _as_text(content: Any) -> str:
    if isinstance(content, str):
        return content
    return normalize_text(content)


class IncrementalIndexer:
    """
    Owns the lifecycle of CodeElements and the file -> content hash registry.
    """

    def __init__(
        self,
        embedder: EmbeddingGenerator,
        keyword_index: Optional[InvertedKeywordIndex] = None,
        vector_store: Optional[InMemoryVectorStore] = None,
        lock: Optional[threading.RLock] = None,
    ):
        self.embedder = embedder
        self.keyword_index = keyword_index if keyword_index is not None else InvertedKeywordIndex()
        self.vector_store = vector_store if vector_store is not None else InMemoryVectorStore()
        self.lock = lock if lock is not None else threading.RLock()

        self.elements: Dict[str, CodeElement] = {}
        self.file_elements: Dict[str, Set[str]] = {}
        self.file_registry: Dict[str, str] = {}

    # ------------------------------------------------------------------
    # Element construction (no shared state touched)
    # ------------------------------------------------------------------

    def build_element(self, file_path: str, element_type: str, name: str, content: Any) -> CodeElement:
        """
        Build a CodeElement with its keywords and embedding.

        Raises:
            InvalidElementError: If element_type is not one of function,
                class, interface, comment
        """
        element_id = make_element_id(file_path, name)
        text = _as_text(content)
        try:
            return CodeElement(
                id=element_id,
                file_path=file_path,
                element_type=element_type,
                name=name,
                content=text,
                embedding=self.embedder.embed(text).tolist(),
                keywords=extract_keywords(text),
            )
        except ValidationError as e:
            raise InvalidElementError(element_id, str(e))

    # ------------------------------------------------------------------
    # Internal mutations (caller holds the lock)
    # ------------------------------------------------------------------

    def _purge(self, element_id: str) -> None:
        element = self.elements.pop(element_id, None)
        if element is None:
            return
        self.keyword_index.remove_all(element.keywords, element_id)
        self.vector_store.remove(element_id)
        owned = self.file_elements.get(element.file_path)
        if owned is not None:
            owned.discard(element_id)

    def _store(self, element: CodeElement) -> None:
        previous = self.elements.get(element.id)
        if previous is not None:
            self._purge(element.id)
            if previous.file_path != element.file_path:
                logger.warning(
                    f"Element id '{element.id}' moved from '{previous.file_path}' to "
                    f"'{element.file_path}' (last write wins)"
                )
                # The old owner's registry hash must track its shrunken element set
                if previous.file_path in self.file_registry:
                    self.file_registry[previous.file_path] = content_hash(self._file_specs(previous.file_path))

        self.elements[element.id] = element
        self.keyword_index.insert_all(element.keywords, element.id)
        self.vector_store.put(element.id, element.embedding)
        self.file_elements.setdefault(element.file_path, set()).add(element.id)

    def _file_specs(self, file_path: str) -> List[ElementSpec]:
        return [
            ElementSpec(element_type=element.element_type, name=element.name, content=element.content)
            for element in (self.elements[eid] for eid in self.file_elements.get(file_path, ()))
        ]

    # ------------------------------------------------------------------
    # Public operations
    # ------------------------------------------------------------------

    def index(self, file_path: str, element_type: str, name: str, content: Any) -> CodeElement:
        """
        Upsert a single element and refresh its file's registry hash.

        Calling this twice with identical arguments leaves postings and
        stats unchanged.
        """
        element = self.build_element(file_path, element_type, name, content)

        with self.lock:
            self._store(element)
            self.file_registry[file_path] = content_hash(self._file_specs(file_path))

        logger.debug(f"Indexed '{element.id}' ({element.element_type}, {len(element.keywords)} keywords)")
        return element

    def reindex_file(self, file_path: str, elements: Iterable[ElementInput]) -> bool:
        """
        Replace the element set of a file if its content hash changed.

        Every id previously registered under file_path is purged from both
        stores before the new set is inserted, so renamed or deleted
        elements leave no stale postings behind.

        Args:
            file_path: Source file path
            elements: New element set (ElementSpec, mapping or tuple items)

        Returns:
            True if the file was reindexed, False if its hash was unchanged
        """
        # Duplicate names collapse to the last occurrence
        specs_by_name: Dict[str, ElementSpec] = {}
        for element in elements:
            spec = to_spec(element)
            specs_by_name[spec.name] = spec
        specs = list(specs_by_name.values())
        digest = content_hash(specs)

        with self.lock:
            if self.file_registry.get(file_path) == digest:
                logger.debug(f"Skipping unchanged file '{file_path}'")
                return False

        built = [self.build_element(file_path, s.element_type, s.name, s.content) for s in specs]

        with self.lock:
            stale = list(self.file_elements.get(file_path, ()))
            for element_id in stale:
                self._purge(element_id)
            for element in built:
                self._store(element)
            self.file_registry[file_path] = digest

        logger.debug(f"Reindexed '{file_path}': {len(stale)} removed, {len(built)} inserted")
        return True

    def remove_file(self, file_path: str) -> bool:
        """
        Remove every element of a file and its registry entry.

        Returns:
            True if anything was removed, False for an unknown path
        """
        with self.lock:
            if file_path not in self.file_registry and file_path not in self.file_elements:
                return False

            removed = list(self.file_elements.pop(file_path, ()))
            for element_id in removed:
                self._purge(element_id)
            self.file_registry.pop(file_path, None)

        logger.debug(f"Removed '{file_path}' ({len(removed)} elements)")
        return True

    @trace
    def sync(self, files: Mapping[str, Iterable[ElementInput]]) -> ReindexReport:
        """
        Run one reindex pass over a complete view of the source tree.

        Each file in `files` is reindexed (or skipped if unchanged) and every
        registered file missing from `files` is removed.
        """
        start_time = time.time()
        report = ReindexReport()

        for file_path, elements in files.items():
            if self.reindex_file(file_path, elements):
                report.reindexed.append(file_path)
            else:
                report.skipped.append(file_path)

        with self.lock:
            vanished = [path for path in self.file_registry if path not in files]
        for file_path in vanished:
            self.remove_file(file_path)
            report.removed.append(file_path)

        report.elapsed_time = time.time() - start_time
        logger.info(
            f"Reindex pass: {len(report.reindexed)} reindexed, {len(report.skipped)} unchanged, "
            f"{len(report.removed)} removed"
        )
        return report
