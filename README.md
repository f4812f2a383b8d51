# bitchest

A lightweight in-memory key-value database. The server speaks a small
RESP-style text protocol over TCP. Each command is one line of text ending in
a newline. Each reply is a simple string (`+OK`), an integer (`:3`), a bulk
string (`$5` followed by the payload), an array of bulk strings (`*2` and so
on), a null (`$-1`) or an error (`-ERR ...`).

## Installation

```
pip install .
```

The package has no runtime dependencies. Install the `test` extra to run the
tests with pytest:

```
pip install ".[test]"
pytest
```

## Running the server

```
bitchest                          # listens on localhost:7463
bitchest -port 6379               # localhost:6379
bitchest -host 0.0.0.0            # all interfaces
bitchest -host 0.0.0.0 -port 6379
```

The options can also be written as `--host` and `--port`. The port must be
between 1024 and 65535, and any other value is rejected. Each client runs in
its own thread, and all clients share one store. The server logs every
connection and command at INFO level, and it runs until interrupted.

## Using the interactive client

```
bitchest-cli                   # connects to localhost 7463
bitchest-cli 127.0.0.1 6379    # host and port as positional arguments
```

The client sends each line you type to the server and prints the reply:

- A bulk string is printed as its content.
- A null is printed as `(nil)`.
- An empty array is printed as `(empty list or set)`.
- Other arrays are printed as a numbered list. An array whose first element contains `=` is printed one element per line without numbers, which is how `MEMORY STATS` output appears.
- Simple strings, integers and errors are printed as received, for example `+OK` or `:1`.
- If no reply arrives within 0.1 seconds, nothing is printed.

The client also accepts these commands of its own:

- `help` shows a summary of the commands.
- `clear` clears the screen.
- `quit` or `exit` closes the connection.

## Commands

Command names are case-insensitive. The option words `EX`, `NX` and `XX`, and
the word `STATS`, must be upper case.

| Command | Description |
|---|---|
| `SET key value [EX seconds] [NX\|XX]` | Set a string value. `EX` sets an expiry. `NX` sets the value only if the key is missing, and `XX` only if it exists. When the condition fails, the reply is null. |
| `GET key` | Get a string value. The reply is null for a missing key and an error for a list key. |
| `DEL key [key ...]` | Delete keys and return how many were removed. |
| `EXISTS key [key ...]` | Count how many of the given keys exist. |
| `KEYS` | List all keys that have not expired. The order is not specified. |
| `FLUSHALL` | Remove every key. |
| `EXPIRE key seconds` | Set an expiry on a string key. Returns `1` on success, and `0` if the key is missing or is not a string. |
| `TTL key` | Seconds left to live. `-1` means no expiry is set, and `-2` means the key is missing or has expired. |
| `PING` | Replies `PONG`. |
| `LPUSH` / `RPUSH key value [value ...]` | Push values onto the head or tail of a list, creating the list if needed. Returns the new length. |
| `LPOP` / `RPOP key [count]` | Pop from the head or tail of a list. Without a count the reply is a bulk string. With a count it is an array. |
| `LLEN key` | Length of a list, or `0` if the key is missing. |
| `LINDEX key index` | Element at an index. Negative indexes count from the end. The reply is null when the index is out of range. |
| `LRANGE key start stop` | Elements from `start` to `stop`, both inclusive. Negative indexes count from the end. |
| `LSET key index value` | Replace the element at an index. The reply is an error when the index is out of range. |
| `LREM key count value` | Remove occurrences of a value. `count > 0` removes from the head, `count < 0` from the tail, and `0` removes all. Returns how many were removed. |
| `MEMORY STATS` | Returns the store counters as `name=value` strings: `keys`, `memory_usage`, `memory_per_key`, `peak_memory_usage`, `number_of_expired_keys` and `data_size`. |

A value can contain spaces if you quote it with single or double quotes. A
quote starts a quoted value only when it follows whitespace. Anywhere else it
is kept as part of the word. A backslash makes the character after it literal.
An empty quoted value (`""`) is dropped. An unterminated quote gives the error
`unterminated quote`.

```
SET greeting "hello world" EX 60
SET doc '{"key": "value"}'
```

## Library use

You can use the store and the commands without a network server:

```python
from bitchest.store import InMemoryDB
from bitchest.handler import execute_line

store = InMemoryDB()
execute_line("SET user:123 John", store)   # '+OK\r\n'
execute_line("GET user:123", store)        # '$4\r\nJohn\r\n'
execute_line("   ", store)                 # None: nothing to reply
```

Other modules you can use directly:

- `bitchest.store.InMemoryDB` offers `set`, `get`, `keys`, `delete`, `flush_all`, `set_expiration`, `get_ttl`, `cleanup_expired` and `stats`.
- `bitchest.values` provides `StringValue` and `ListValue`.
- `bitchest.tokenizer.tokenize` splits a command line into tokens.
- `bitchest.protocol` encodes replies.
- `bitchest.registry` exposes the command registry through `register_command` and `extract_command`.

## What it does not do

- Data lives only in memory. Nothing is written to disk, and everything is lost when the server stops.
- Only string keys can be given an expiry. Expired keys are removed when they are next read, or when `InMemoryDB.cleanup_expired` is called.
- There are no commands for sorted sets. `SortedSetValue` exists as a type but holds no data.
- There is no authentication, pattern matching for `KEYS`, or replication.
- The server reads plain text lines, not the binary-safe array framing of the full RESP protocol.