"""
CodeIndex: the hybrid code search index.

Composes the tokenizer, keyword extractor, embedding generator, inverted
keyword index, vector store, search engine and incremental indexer into one
explicitly owned object. Create one per project; there is no global instance.
"""

import threading
from typing import Any, Iterable, List, Mapping, Optional

from codeindex.incremental import IncrementalIndexer
from codeindex.incremental.indexer import ElementInput
from codeindex.index import InvertedKeywordIndex, compute_stats
from codeindex.retrieval import SearchEngine
from codeindex.schemas import CodeElement, IndexStats, ReindexReport, SearchResult
from codeindex.semantic import EmbeddingGenerator, HashingEmbeddingGenerator, InMemoryVectorStore


class CodeIndex:
    """
    In-memory hybrid (keyword + vector) index of code elements.

    All mutations go through the incremental indexer under a single writer
    lock; searches take the same lock, so a reindexed file is observed
    either entirely before or entirely after its replacement.
    """

    def __init__(
        self,
        embedder: Optional[EmbeddingGenerator] = None,
        keyword_index: Optional[InvertedKeywordIndex] = None,
        vector_store: Optional[InMemoryVectorStore] = None,
    ):
        self.embedder = embedder if embedder is not None else HashingEmbeddingGenerator()
        self._lock = threading.RLock()
        self._indexer = IncrementalIndexer(
            self.embedder,
            keyword_index=keyword_index,
            vector_store=vector_store,
            lock=self._lock,
        )
        self._engine = SearchEngine(
            self._indexer.elements,
            self._indexer.keyword_index,
            self._indexer.vector_store,
            self.embedder,
        )

    # --- writes -------------------------------------------------------

    def index(self, file_path: str, element_type: str, name: str, content: Any) -> CodeElement:
        return self._indexer.index(file_path, element_type, name, content)

    def reindex_file(self, file_path: str, elements: Iterable[ElementInput]) -> bool:
        return self._indexer.reindex_file(file_path, elements)

    def remove_file(self, file_path: str) -> bool:
        return self._indexer.remove_file(file_path)

    def sync(self, files: Mapping[str, Iterable[ElementInput]]) -> ReindexReport:
        return self._indexer.sync(files)

    # --- reads --------------------------------------------------------

    def search_by_keyword(self, query: str, limit: int = None) -> List[SearchResult]:
        with self._lock:
            return self._engine.search_by_keyword(query, limit)

    def search_by_embedding(self, query: str, limit: int = None) -> List[SearchResult]:
        with self._lock:
            return self._engine.search_by_embedding(query, limit)

    def search(
        self,
        query: str,
        keyword_weight: float = None,
        semantic_weight: float = None,
        limit: int = None,
    ) -> List[SearchResult]:
        with self._lock:
            return self._engine.search(
                query,
                keyword_weight=keyword_weight,
                semantic_weight=semantic_weight,
                limit=limit,
            )

    def get_stats(self) -> IndexStats:
        with self._lock:
            return compute_stats(
                self._indexer.elements.values(),
                len(self._indexer.keyword_index),
                self._indexer.file_registry,
            )

    def get_element(self, element_id: str) -> Optional[CodeElement]:
        with self._lock:
            return self._indexer.elements.get(element_id)

    def elements_for_file(self, file_path: str) -> List[CodeElement]:
        with self._lock:
            ids = sorted(self._indexer.file_elements.get(file_path, ()))
            return [self._indexer.elements[element_id] for element_id in ids]

    def content_hash(self, file_path: str) -> Optional[str]:
        with self._lock:
            return self._indexer.file_registry.get(file_path)

    @property
    def keyword_index(self) -> InvertedKeywordIndex:
        return self._indexer.keyword_index

    @property
    def vector_store(self) -> InMemoryVectorStore:
        return self._indexer.vector_store

    def __len__(self) -> int:
        return len(self._indexer.elements)

    def __repr__(self) -> str:
        stats = self.get_stats()
        return (
            f"CodeIndex({stats.total_embeddings} elements, {stats.total_keywords} keywords, "
            f"{stats.files_indexed} files)"
        )
