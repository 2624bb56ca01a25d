# scanslam

Building blocks for grid-based laser SLAM and scan matching, in pure Python
with no dependencies beyond the standard library:

- 2D points and poses with the usual pose arithmetic,
- forward/sideward/rotate movements between poses,
- eigen-decomposition of small symmetric matrices,
- Bresenham traversal of grid cells,
- closed-form rigid alignment of corresponding point sets,
- Gaussian sampling and a Gaussian over poses,
- a Parzen-window smoother for weighted 1D samples,
- range and odometry sensor models and their readings,
- a small dense matrix type,
- oriented bounding boxes,
- a process memory report.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `scanslam.geometry` | `Point`, `OrientedPoint`, `normalize_angle`, `absolute_difference`, `absolute_sum`, `interpolate`, `euclidean_dist`, `square_dist`, `point_max`, `point_min`, `radial_order_key` |
| `scanslam.movement` | `FSRMovement`, `frame_transformation` |
| `scanslam.eigen3` | `eigen_decomposition` |
| `scanslam.gridline` | `grid_line`, `grid_line_core` |
| `scanslam.lumiles` | `lu_miles_step` |
| `scanslam.stats` | `sample_gaussian`, `sample_uniform_double`, `eval_log_gaussian`, `Covariance3`, `Gaussian3` |
| `scanslam.smoother` | `DataSmoother`, `DataPoint` |
| `scanslam.sensors` | `Sensor`, `OdometrySensor`, `Beam`, `RangeSensor`, `SensorReading`, `OdometryReading`, `RangeReading` |
| `scanslam.matrix` | `DMatrix`, `MatrixError`, `NotInvertibleMatrixError`, `IncompatibleMatrixError`, `NotSquareMatrixError` |
| `scanslam.bbox` | `OrientedBoundingBox` |
| `scanslam.memusage` | `memory_usage`, `print_memory_usage` |

## Examples

### Poses

`OrientedPoint` is an immutable `(x, y, theta)` pose. `absolute_difference(p1, p2)`
expresses `p1` in the frame of `p2`; `absolute_sum(p1, p2)` applies an increment
given in the frame of `p1`.

```python
from scanslam.geometry import OrientedPoint, absolute_difference, absolute_sum

a = OrientedPoint(1.0, 2.0, 0.5)
b = OrientedPoint(2.0, 3.0, 1.0)
delta = absolute_difference(b, a)   # b seen from a
back = absolute_sum(a, delta)       # approximately b again
```

`normalize_angle` and `OrientedPoint.normalized()` bring an angle into `[-pi, pi)`.

### Movements

```python
from scanslam.geometry import OrientedPoint
from scanslam.movement import FSRMovement

a = OrientedPoint(0.0, 0.0, 0.0)
b = OrientedPoint(1.0, 1.0, 1.57)
move = FSRMovement.between(a, b)
move.move(a)                        # approximately b
move.composed(move.inverted())      # approximately the zero movement
```

`frame_transformation(ref1, ref2, pose)` maps a pose from one frame to another,
given one reference pose in each.

### Grid lines

```python
from scanslam.geometry import Point
from scanslam.gridline import grid_line

cells = grid_line(Point(0, 0), Point(5, 2))
# a list of Point cells from the start cell to the end cell
```

### Eigen-decomposition

```python
from scanslam.eigen3 import eigen_decomposition

values, vectors = eigen_decomposition([[2.0, 0.0, 0.0],
                                       [0.0, 1.0, 0.0],
                                       [0.0, 0.0, 3.0]])
# values == [1.0, 2.0, 3.0], ascending; eigenvectors are the columns of `vectors`
```

A `ValueError` is raised for an empty or non-square matrix.

### Rigid alignment

```python
from scanslam.geometry import Point
from scanslam.lumiles import lu_miles_step

src = [Point(0, 0), Point(1, 0), Point(0, 1)]
dst = [Point(2, 3), Point(3, 3), Point(2, 4)]
lu_miles_step(src, dst)             # OrientedPoint(2.0, 3.0, 0.0)
```

### Gaussians over poses

```python
from scanslam.geometry import OrientedPoint
from scanslam.stats import Covariance3, Gaussian3

g = Gaussian3.from_covariance(OrientedPoint(), Covariance3(xx=1.0, yy=0.5, tt=0.1))
g.eval(OrientedPoint(0.1, 0.0, 0.0))   # log density at the pose
```

`sample_gaussian(sigma, seed=0)` draws from a zero-mean Gaussian; a non-zero
seed reseeds the shared generator first.

### Smoothing weighted samples

```python
import io
from scanslam.smoother import DataSmoother

s = DataSmoother(0.1)
s.add(0.0, 1.0)
s.add(0.5, 2.0)
mean, sigma = s.approx_gauss(0.01)
draws = s.sample_multiple(10)
out = io.StringIO()
s.dump_smoothed_data(out, 0.05)      # "x density" lines
```

### Sensors and readings

```python
from scanslam.geometry import OrientedPoint
from scanslam.sensors import RangeSensor, RangeReading

sensor = RangeSensor.from_resolution("FLASER", 180, 0.01745, OrientedPoint(), 0.0, 80.0)
reading = RangeReading(sensor=sensor, time=0.0, dists=[2.0] * 180)
reading.raw_view(0.05)        # beams too close to the last kept end become sys.float_info.max
reading.active_beams(0.05)    # how many beams survive that filter
reading.cartesian_form(80.0)  # beam end points in the robot frame
```

### Matrices

```python
from scanslam.matrix import DMatrix

m = DMatrix(values=[[4.0, 7.0], [2.0, 6.0]])
m.det()                       # 10.0
m.inverse() * m               # approximately the identity
str(DMatrix.identity(2))      # "{{1,0},{0,1}}"
```

Shape mismatches raise `IncompatibleMatrixError`, singular matrices
`NotInvertibleMatrixError`, and `det()` of a non-square matrix
`NotSquareMatrixError`; all derive from `MatrixError`.

### Oriented bounding boxes

```python
from scanslam.bbox import OrientedBoundingBox
from scanslam.geometry import Point

box = OrientedBoundingBox([Point(0, 0), Point(1, 1), Point(2, 2.5), Point(3, 2.9)])
box.area()
```

A point set whose covariance has no cross term raises `ValueError`.

### Memory usage

`memory_usage()` returns the `VmData` and `VmSize` entries of the process status
file (`/proc/<pid>/status`) as a dict of strings, or an empty dict when it cannot
be read. `print_memory_usage()` writes them to standard error.

## What the package does not do

It provides the pieces, not a mapper: there is no occupancy grid map, no scan
matcher, no particle filter and no command-line program. It does not read log
files and does not write map images.