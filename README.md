# vcutil

Small helpers for Python 3.10 and later, using only the standard library.

## Modules

- `vcutil.tfidf`: `TFIDF` builds document frequencies over token lists; `TFIDF.idf(token)` gives the inverse document frequency (0.0 for unseen tokens).
- `vcutil.bm25`: `BM25(docs_tokens, k1, b)` scores documents with `score(query_tokens, doc_tokens)` and `all_docs_scores(query_tokens)`. An empty corpus raises `ValueError`.
- `vcutil.vector`: `dot`, `l2_norm`, `cosine` and `cosine_normalized`. Vectors of different lengths raise `ValueError`.
- `vcutil.mathutil`: `to_fixed`, `divide`, `sigmoid`, `gcd`, `lcm`, `linear_interpolator`, `exponential_decay`, `half_life_decay`, `steps_decay`, `log_base`, `safe_division`, `safe_division_str`, `atan_normalize` and `l2_normalize`.
- `vcutil.strutil`: `lcs_length` (byte-wise longest common subsequence), `split_int64`, `split_int32`, `split_nonempty`, `join_ints`, `parse_ints`, `struct_to_string`, `format_float` and `format_bool`.
- `vcutil.think`: `parse_output` and `remove_think` split off a `</think>` reasoning block; `message_content`, `content_without_think` and `content_as_json` read the content of a chat message (an object with `.content` or a mapping).
- `vcutil.sliceutil`: list helpers such as `partition`, `intersection`, `remove_dups`, `get_part`, `compare`, `merge_in_order`, `move_to_front`, `percentile` and `first_if`.
- `vcutil.mapping`: dict helpers such as `invert`, `diff`, `chunked`, `group_by`, `map_values`, `map_keys`, `put_if_absent`, `to_dict` and `chain`.
- `vcutil.iterutil`: `total`, `chunk`, `merge` and `merge_distinct`.
- `vcutil.sets`: `KeySet`, a `set` with `has`, `to_list`, `overlaps` and `enumerate`, whose union, intersection and difference return `KeySet`.
- `vcutil.cache`: `Cache`, a lock-guarded key/value store, and `ShardCache`, a fixed number of caches picked by key length.
- `vcutil.optional`: `value_or`, `none_if_zero`, `equal_values`, `non_default_or`, `bool_to_int`, `int_to_bool`, `int_assertion`, `assertion` and `must`.
- `vcutil.conversation`: `SimpleMemory` keeps `Conversation`s of `Message`s in a directory, one `.jsonl` file per conversation; `default_memory()` uses `data/memory` with a window of six messages.
- `vcutil.retry`: `retry`, `retry_func`, `must` and `timer_func`, which calls a function periodically on a background thread and returns a stop function.
- `vcutil.timing`: `log_time_cost`, `log_time_cost_per_job` and `warn_time_cost` log through `logging` when a block takes at least the threshold in milliseconds.
- `vcutil.locks`: `Locker.do(f)` and `RWLocker.read(f)` / `RWLocker.write(f)`.
- `vcutil.embedding`: `EmbeddingClient(url).embed(*texts)` posts `{"ss": [...]}` to an embedding service and returns its vectors.
- `vcutil.response`: `HTTPResponse` with `to_dict()`, and the constructors `success`, `success_none` and `error`.
- `vcutil.command`: `attach_execute_command(session, cmd)` builds a `screen ... -X stuff` command line as a string.

## Installation

```
pip install .
```

## Examples

```python
from vcutil.bm25 import BM25

docs = [
    ["call", "of", "duty", "review"],
    ["call", "weapons", "guide"],
    ["apex", "weapons"],
]
ranker = BM25(docs, 1.2, 0.75)
print(ranker.all_docs_scores(["call", "guide"]))
```

```python
from vcutil.think import remove_think

print(remove_think("<think>pondering</think>The answer is 42."))
```

```python
from vcutil.conversation import Message, SimpleMemory

memory = SimpleMemory("data/memory", max_window_size=6)
chat = memory.get_conversation("demo", create_if_not_exist=True)
chat.append(Message(role="user", content="hello"))
print(chat.messages_window())
print(memory.list_conversations())
```

```python
from vcutil.timing import log_time_cost

with log_time_cost(100, "loading index"):
    ...  # logged at INFO if this takes 100 ms or more
```

## What it does not do

The package is a library only: it has no command-line program and no HTTP server. `vcutil.response` builds response envelopes but does not serve them, `vcutil.embedding` is only a client for an existing embedding service, and `vcutil.command` builds a command string without running it. Storage is limited to the JSON-lines files of `vcutil.conversation`; there is no database support.

## Running the tests

```
pip install ".[test]"
pytest
```