# robocar

A small library for sending drive commands to a robot car over UDP. It also
has some building blocks for mesh index bookkeeping and 3x3 matrix math.

## Installation

```
pip install .
```

To run the tests, install the test extra:

```
pip install .[test]
pytest
```

## Modules

- `robocar.remote_client` has two classes.
  - `DataPacket` is a dataclass for the control packet. Its fields are wheel
    speeds, turn, a null-position flag and the gains `kp`, `kd`, `ki`, `kf`
    and `kt`. `pack()` encodes it as 36 little-endian bytes.
  - `RemoteClient` sends the packet to port 8888 by default.
    `toggle_connection(ip)` starts a background thread that calls `update()`
    every 10 ms. When the client is already sending, the same call stops the
    thread, resets the drive state and sends one zeroed packet.
  - Each `update()` also reads one reply from the car and adds it to
    `text_input()`. That text is cleared after ten replies.
  - `set_turn_coefficient(n)` sets the factor applied to the turn. A negative
    `n` gives a factor of `1/|n|`, and 0 counts as 1.
  - The client can be used as a context manager. Leaving the block calls
    `close()`.
- `robocar.dvector` has `DVector`, a growable sequence kept in blocks of 2048
  elements.
- `robocar.refcount_vector` has `RefCountVector`. It keeps a reference count
  for each index and puts freed indices on a free list for reuse.
  `indices()`, `mapped_indices()` and `filtered_indices()` iterate over the
  indices in use.
- `robocar.small_list_set` has `SmallListSet`, which stores many small integer
  lists in shared flat buffers. A list keeps eight items in its block, and any
  further items go into a pooled linked list.
- `robocar.iterators` has the generator helpers `mapped`, `filtered` and
  `expand`.
- `robocar.index_util` has helpers for triangle vertex triples, such as
  `find_tri_index`, `find_tri_other_vtx`, `orient_tri_edge` and `apply_map`.
  It also has ID constants such as `INVALID_ID`.
- `robocar.matrix3` has `Matrix3`, with arithmetic, determinant, inverse,
  transpose and trace. It also has `identity`, `zeros` and `outer`.
- `robocar.matrix3_transforms` builds scale, translation, rotation
  (axis/angle, Euler angles, quaternion), look-at, billboard, skew-symmetric and
  Lorentz-boost matrices. It also has `apply_*` helpers that compose them with
  an existing matrix.
- `robocar.matrix3_analysis` has `euler_angles`, a Jacobi `diagonalize` and
  `gram_schmidt`.

## Example

```python
from robocar.remote_client import RemoteClient

with RemoteClient() as client:
    client.set_speed(120)
    client.set_turn(-30)
    client.set_turn_coefficient(2)
    client.toggle_connection("192.0.2.10")   # start sending
    client.update()
    print(client.text_input())
    client.toggle_connection("192.0.2.10")   # stop and send a zeroed packet
```

```python
from robocar.matrix3 import Matrix3

m = Matrix3(2, 0, 0, 0, 3, 0, 0, 0, 4)
assert m.determinant() == 24.0
assert m.transpose() == m
```

## What it does not do

The package has no command-line program and no graphical control panel.
`RemoteClient` is a library class that you drive from your own code. The
package does no mesh generation and no 3D rendering. Its mesh and matrix
modules are standalone containers and math helpers.