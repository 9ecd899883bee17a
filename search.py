import time

from constants import RESULT_LIMIT, DEFAULT_QUERIES


def top5_search(kw1, kw2, index, limit=RESULT_LIMIT):
    """
    Documents containing kw1 or kw2, highest frequency first.

    Both occurrence lists are walked like the merge step of merge sort. Equal
    frequencies go to kw1 first, a document found under both keywords is
    listed once, and at most `limit` names are returned. Returns an empty
    list when neither keyword is indexed.
    """
    first = index.get(kw1.strip().lower(), [])
    second = index.get(kw2.strip().lower(), [])

    top = []
    seen = set()
    i = j = 0
    while len(top) < limit:
        if i < len(first) and (j >= len(second) or first[i].frequency >= second[j].frequency):
            occurrence = first[i]
            i += 1
        elif j < len(second):
            occurrence = second[j]
            j += 1
        else:
            break

        if occurrence.document in seen:
            continue
        seen.add(occurrence.document)
        top.append(occurrence.document)

    return top


def run_query(engine, kw1, kw2):
    start_time = time.time()
    results = engine.top5_search(kw1, kw2)
    print(f"Query processed in {(time.time() - start_time) * 1000:.2f} ms")

    if results:
        for i, doc_id in enumerate(results, start=1):
            print(f"{i}. {doc_id}")
    else:
        print("No documents matched.")
    print("-" * 50)
    return results


def run_predefined_queries(engine):
    print("\nRunning Predefined Queries...\n")
    for idx, (kw1, kw2) in enumerate(DEFAULT_QUERIES, 1):
        print(f"{idx}. Query: {kw1} or {kw2}")
        run_query(engine, kw1, kw2)


def search_interface(engine):
    print("\nLittle Search Engine")
    print("Enter two keywords separated by a space.")
    print("Type '/test' to run predefined queries.")
    print("Type 'exit' or 'q' to quit.\n")

    while True:
        try:
            query = input("Search: ").strip()
        except EOFError:
            break
        if query.lower() in {"exit", "q"}:
            print("Exiting search.")
            break
        if query.lower() == "/test":
            run_predefined_queries(engine)
            continue

        terms = query.split()
        if len(terms) != 2:
            print("Please enter exactly two keywords.")
            continue
        run_query(engine, *terms)
