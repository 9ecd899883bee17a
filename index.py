'''
Builds the keyword index over the documents listed in a manifest file and
answers two-keyword queries against it
'''
import sys
import logging
import argparse

from constants import (
    DOCS_FILE, NOISE_WORDS_FILE, RESULT_LIMIT, AUTOCOMPLETE_LIMIT,
    LOG_FORMAT, LOG_DATE_FORMAT,
)
from utils import load_noise_words, read_doc_list, document_tokens
from index_builder import build_index, index_stats, write_analytics
from search import top5_search, run_query, search_interface

logger = logging.getLogger(__name__)


class SearchEngine:
    """Owns one keyword index and the noise words it was built with."""

    def __init__(self, keywords_index=None, noise_words=None):
        self.keywords_index = keywords_index if keywords_index is not None else {}
        self.noise_words = set(noise_words or ())

    def make_index(self, docs_file, noise_words_file, workers=1):
        # nothing is replaced unless every document was read and merged
        noise_words = load_noise_words(noise_words_file)
        doc_ids = read_doc_list(docs_file)
        logger.info(f"Indexing {len(doc_ids)} documents listed in {docs_file}")
        keywords_index = build_index(doc_ids, document_tokens, noise_words, workers=workers)
        self.noise_words = noise_words
        self.keywords_index = keywords_index
        return self

    def index_documents(self, doc_ids, token_source_for=document_tokens, workers=1):
        self.keywords_index = build_index(doc_ids, token_source_for, self.noise_words, workers=workers)
        return self

    def top5_search(self, kw1, kw2):
        return top5_search(kw1, kw2, self.keywords_index, limit=RESULT_LIMIT)

    def complete(self, prefix, limit=AUTOCOMPLETE_LIMIT):
        prefix = prefix.strip().lower()
        if not prefix:
            return []
        return sorted(kw for kw in self.keywords_index if kw.startswith(prefix))[:limit]

    def stats(self):
        return index_stats(self.keywords_index)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Little Search Engine")
    parser.add_argument("--docs", default=DOCS_FILE, help="File listing the documents to index")
    parser.add_argument("--noise", default=NOISE_WORDS_FILE, help="File listing the noise words")
    parser.add_argument("--workers", type=int, default=1, help="Documents scanned concurrently")
    parser.add_argument("--analytics", help="Write index statistics to this file")
    parser.add_argument("keywords", nargs="*", help="Two keywords to search for")
    args = parser.parse_args(argv)
    if args.keywords and len(args.keywords) != 2:
        parser.error("expected exactly two keywords")
    return args


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    engine = SearchEngine()
    try:
        engine.make_index(args.docs, args.noise, workers=args.workers)
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Could not build index: {e}")
        return 1

    if args.analytics:
        write_analytics(engine.keywords_index, args.analytics)
        logger.info(f"Wrote analytics to {args.analytics}")

    if args.keywords:
        run_query(engine, *args.keywords)
    else:
        search_interface(engine)
    return 0


if __name__ == "__main__":
    sys.exit(main())
