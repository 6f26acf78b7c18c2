# grinminer

Building blocks for a Grin miner, with no dependencies beyond the
standard library:

- a Cuckatoo cycle finder that searches a trimmed edge list for 42-cycles,
- siphash key derivation from block headers,
- the data types exchanged with solvers (parameters, statistics, solutions),
- stratum JSON-RPC payloads and the messages passed between a client and a miner,
- mining statistics with a rolling graphs-per-second average,
- a sortable, keyboard-driven text table.

## Modules

| Module | Contents |
| --- | --- |
| `grinminer.hexutil` | `to_hex`, `from_hex` |
| `grinminer.solver` | `SolverParams`, `SolverStats`, `Solution`, `SolverSolutions`, `decode_name`, `PROOFSIZE`, `MAX_SOLS` |
| `grinminer.keys` | `create_siphash_keys`, `set_header_nonce`, `fill_default_params`, `normalize_edge_bits`, `platform_name`, `duration_to_nanos` |
| `grinminer.finder` | `Graph` (with `Graph.search`), `Solution` |
| `grinminer.stats` | `Stats`, `ClientStats`, `MiningStats`, `SolutionStats` |
| `grinminer.messages` | `JobTemplate`, `RpcRequest`, `RpcResponse`, `RpcError`, `LoginParams`, `SubmitParams`, `WorkerStatus`, and the messages `ReceivedJob`, `StopJob`, `MinerShutdown`, `FoundSolution`, `ClientShutdown` |
| `grinminer.tablecolumn` | `TableColumn`, `Order`, `HAlign` |
| `grinminer.table` | `TableView`, `Key` |

## Examples

Hex encoding and decoding (a leading `0x` is accepted; empty, odd-length
or non-hex input raises `ValueError`):

```python
from grinminer.hexutil import from_hex, to_hex

assert to_hex(bytes([10, 11, 12, 13])) == "0a0b0c0d"
assert from_hex("0x000000ff") == bytes([0, 0, 0, 255])
```

Deriving the four 64-bit siphash keys for a header, with the nonce
written little-endian into its last four bytes:

```python
from grinminer.keys import set_header_nonce

keys = set_header_nonce(bytes(80), 42, True)
assert len(keys) == 4
```

Searching a trimmed edge buffer for cycles. Word 1 holds the edge count;
edge `i` (counting from 1) occupies words `4*i` to `4*i + 2` as node,
node, nonce. Each solution holds the sorted nonces of a 42-cycle:

```python
from grinminer.finder import Graph

edges = [0, 1, 0, 0, 10, 21, 7, 0]
assert Graph.search(edges) == []
```

Solutions from a solver hash to 32 bytes and print their proof in hex:

```python
from grinminer.solver import Solution

solution = Solution(nonce=5, proof=list(range(42)))
assert len(solution.hash()) == 32
print(solution)  # Nonce:5 [0x0, 0x1, ...]
```

Building a stratum request:

```python
from grinminer.messages import RpcRequest

request = RpcRequest(id="0", jsonrpc="2.0", method="getjobtemplate")
assert request.to_json() == '{"id":"0","jsonrpc":"2.0","method":"getjobtemplate","params":null}'
```

Keeping a running average of graphs per second; the newest 50 samples
are kept:

```python
from grinminer.stats import Stats

stats = Stats()
stats.mining_stats.add_combined_gps(1.5)
stats.mining_stats.add_combined_gps(2.5)
assert stats.mining_stats.combined_gps() == 2.0
```

A text table. Items provide `to_column(column)` and
`compare(other, column)`; the first column added is the default sort
column, and `on_event` takes `Key` values:

```python
from grinminer.table import Key, TableView

class Row:
    def __init__(self, name):
        self.name = name
    def to_column(self, column):
        return self.name
    def compare(self, other, column):
        return (self.name > other.name) - (self.name < other.name)

table = TableView().column("name", "Name", lambda c: c.width(10))
table.set_items([Row("b"), Row("a")])
table.layout(20, 10)
for line in table.render():
    print(line)
```

## What this package does not do

It has no command to run and does not mine by itself. It does not
connect to a stratum server, drive solver devices or trim graphs on a
GPU, set up logging, or show an interactive status screen; the types and
helpers above are meant to be used by code that does.

## Tests

The test suite uses pytest and is installed with the `test` extra:

```
pip install .[test]
pytest
```