# cfkit

Small building blocks for Python programs. It uses only the standard library.

## Modules

- `cfkit.errors`: error numbers that hold a module id and a code in one integer. Use `make_errno`, `error_module` and `error_code` to build and split them. `ErrorCode` lists the common codes of module 0. `CfError` is an exception that carries an error number. `register(module, fn)` installs a function that describes the codes of one module, and `strerror(err)` looks up the description.
- `cfkit.numerics`: `Unwrapper` turns wrapping 8, 16 and 32 bit counters into one continuous integer with `unwrap_u8`, `unwrap_u16` and `unwrap_u32`. A forward step of more than half the range counts as a step back. `reset()` forgets all earlier values.
- `cfkit.hexdump`: `mem2hex(data)` writes bytes as upper-case hex, in groups of 4 bytes with 16 bytes per line.
- `cfkit.array`: `Array(elm_size, capacity)` holds elements of a fixed byte size, padded with zeros. Index `-1` means the last element, or the end when you insert. Its methods are `insert`, `erase`, `set`, `get`, `find`, `reserve` and `reset`. A bad index raises `IndexError`.
- `cfkit.bytebuf`: `ByteReader.get(n)` reads exactly `n` bytes and raises `EOFError` if there are not enough. `ByteWriter(capacity).put(data)` appends bytes and raises `BufferError` if they do not fit.
- `cfkit.fifobuf`: `FifoBuffer(size)` is a ring of records. Each record is stored with a two-byte little-endian length in front. Its methods are `write`, `read` and `peek`. `len()` gives the size of the storage, and `used` gives the bytes taken.
- `cfkit.hashtable`: `HashTable(size, on_remove)` has chained buckets and a 32-bit times-33 hash (`hash_key`). Setting a value of `None` removes the key. `on_remove` receives each removed value, also when you call `close()`. `get_by_hash` and `set_by_hash` use a 32-bit number as the key.
- `cfkit.linkedlist`: `LinkedList` is a doubly linked list that gives back `Node` handles. Its methods are `insert_before`, `insert_after`, `erase`, `push_back`, `push_front`, `head`, `tail`, `find`, `nodes` and `clear`.
- `cfkit.ordmap`: `OrderedMap(cmp)` keeps its keys sorted by a three-way comparison function. If you give none, natural order is used.
- `cfkit.mempool`: `MemoryPool(block_size).alloc(size)` returns writable `memoryview` slices cut from blocks, aligned to 4 bytes. `stat()` returns a `PoolStat`.
- `cfkit.clock`: `Clock(kind, offset_ns)` reads steady time or wall time (`ClockKind`) in ns, ms or s. Shared clocks come from `steady_clock()`, `steady_high_clock()` and `system_clock()`. There is also a global clock that you can replace: `global_clock()` and `set_global_clock()`.
- `cfkit.event`: `ResetEvent(manual_reset, signaled)` has `set`, `reset` and `wait(timeout_ms)`, where `-1` waits forever. An auto-reset event clears itself after a successful wait.
- `cfkit.env`: `get_env` (raises `KeyError` if the variable is unset), `set_env`, `delete_env` and `get_home`.
- `cfkit.options`: `parse_option(argv, pos)` reads one short (`-a value`), long (`--name`, `--name=value`) or grouped (`-abc`) option and returns it with the next position. `iter_options(argv)` yields all of them.
- `cfkit.cli`: `Cli` is a tree of commands made of space-separated words, with a built-in `?` for help. `input(argv)` runs the matching command, or raises `CfError` when none fits. `parse_args(s)` splits a line; double quotes group words.
- `cfkit.files`: `file_type` (`FileType`), `exists`, `isfile`, `isdir`, `copy`, `rename`, `mkdir`, `remove`, `rmdir`, `chdir`, `getcwd`, `link`, `unlink` and `listdir`.
- `cfkit.logger`: `Logger` sends each record at or above its level to every sink, for example a `FileSink` writing to a text stream. `default_logger()` returns a logger shared by the whole process. `LogLevel` names the levels.
- `cfkit.logwriter`: `LogWriter` writes to stdout or to a file (`to_file`, `to_terminal`). The file starts over once it grows past `set_file_size` megabytes. Terminal output can be coloured (`set_color`), and writes can be locked (`use_lock`).

## Install

    pip install .

## Examples

    from cfkit.numerics import Unwrapper

    u = Unwrapper()
    u.unwrap_u8(250)
    u.unwrap_u8(3)      # 259: the counter wrapped forward

    from cfkit.fifobuf import FifoBuffer

    fifo = FifoBuffer(64)
    fifo.write(b"hello")
    fifo.read()         # b"hello"

    from cfkit.cli import Cli, parse_args

    cli = Cli()
    cli.register("show version", "print the version", lambda cli, sess, args: 0)
    cli.input(parse_args("show version"))   # 0

## What it does not do

The package installs no command-line program. `Cli` and the option parser are meant for building your own. There are no helpers for sockets, polling, threads or loading shared libraries.

## Tests

    pip install .[test]
    pytest