# =============================================================================
# Document Worker Pool
# =============================================================================
# Runs a per-document function over a document sequence, optionally on a
# thread pool, and hands results back to the calling thread one by one.
#
# Only the per-document work runs in workers. Whatever the caller does with
# each result (merging counts, tallying) happens in the calling thread.
#
# Unreadable documents come back as DocumentReadError instead of a result,
# so the caller decides how to skip them.
# =============================================================================

from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Any, Callable, Iterable, Iterator, TypeVar

from bayes_spam.core import Document, DocumentReadError, as_document

T = TypeVar("T")


def describe(item: Any, index: int) -> str:
    """Name an input item for log messages, even if it isn't a Document."""
    if isinstance(item, Document):
        return item.name
    return f"<document {index}>"


def map_documents(
    documents: Iterable[Any],
    func: Callable[[Document, str], T],
    *,
    workers: int = 1,
) -> Iterator[tuple[str, Document | None, T | DocumentReadError]]:
    """
    Read each document and apply ``func(document, text)``.

    Args:
        documents: Documents or ``(text, is_spam)`` pairs.
        func: Work to do on each readable document.
        workers: Thread count. 1 runs in the calling thread, in order.

    Yields:
        ``(name, document, result)``. For unreadable documents the
        document may be None and the result is the DocumentReadError.
        With more than one worker, results arrive in completion order.
    """
    def run(index: int, item: Any) -> tuple[Document | None, T | DocumentReadError]:
        try:
            doc = as_document(item, index=index)
        except DocumentReadError as e:
            return None, e
        try:
            text = doc.read()
        except DocumentReadError as e:
            return doc, e
        return doc, func(doc, text)

    if workers <= 1:
        for index, item in enumerate(documents):
            doc, result = run(index, item)
            yield describe(item, index), doc, result
        return

    with ThreadPoolExecutor(max_workers=workers) as pool:
        futures = {
            pool.submit(run, index, item): describe(item, index)
            for index, item in enumerate(documents)
        }
        for future in as_completed(futures):
            doc, result = future.result()
            yield futures[future], doc, result
