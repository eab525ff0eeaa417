# robomath

Mathematics for small mobile robots: angles, points and poses in the plane,
rectangles, Runge-Kutta integrators, a linearly interpolating lookup table,
and a square-root unscented Kalman filter.

numpy is the only dependency.

## Geometry

All geometry types are immutable values. Coordinates follow the usual
Cartesian convention: +X right, +Y up, positive angles counter-clockwise.
Wherever a rotation is expected by `Transform2d` or `Pose2d`, a plain number
of radians may be given instead of a `Rotation2d`.

```python
from robomath.rotation2d import Rotation2d, from_degrees, wrap_degrees_180
from robomath.translation2d import Translation2d, mean
from robomath.transform2d import Transform2d
from robomath.pose2d import Pose2d, wrapped_pose_mean

heading = from_degrees(270)
heading.wrapped_degrees_180()   # close to -90
(heading + from_degrees(180)).wrapped_degrees_360()   # close to 90

p = Translation2d(3, 4)
p.norm()                        # 5.0
p.rotate_by(from_degrees(90))   # approximately (-4, 3)
p * Translation2d(1, 0)         # dot product: 3.0
p * 2                           # scaled: (6, 8)
Translation2d.from_polar(2, from_degrees(90))

start = Pose2d(Translation2d(0, 0), from_degrees(0))
end = Pose2d.from_xy(1, 1, from_degrees(90))
delta = end - start             # component-wise Transform2d
start + delta == end            # True
end.relative_to(start)          # end expressed in start's frame
```

`Rotation2d` keeps its value continuously; `radians()`, `degrees()` and
`revolutions()` return it unwrapped, the `wrapped_*_180` methods return
values in [-pi, pi), [-180, 180) or [-0.5, 0.5), and the `wrapped_*_360`
methods values in [0, 2pi), [0, 360) or [0, 1). The free functions
`wrap_degrees_180`, `wrap_radians_360` and the rest do the same for plain
numbers; `deg2rad` and `rad2deg` convert. `Rotation2d.from_xy(x, y)` gives
the angle to a point, and `rotation_matrix()` the 2x2 numpy matrix.

Equality on rotations, translations, transforms and poses is tolerant:
values within 1e-9 of each other compare equal. These types are not hashable.

Averages:

- `robomath.rotation2d.unwrapped_mean` — arithmetic mean of the raw angles;
- `robomath.rotation2d.wrapped_mean` — circular mean through unit vectors;
- `robomath.translation2d.mean` — component-wise mean of points;
- `robomath.pose2d.wrapped_pose_mean` — mean position and circular mean heading.

Each raises `ValueError` when given nothing to average.

`Transform2d` can also be built with `from_xy`, `from_vector([x, y, theta])`
or `between(start, end)`; `inverse()` (and unary minus) undoes it.
`Pose2d.with_rotation` returns the same position with another heading.

### Rectangles

```python
from robomath.rect import Rect
from robomath.translation2d import Translation2d

field = Rect.from_min_and_size(Translation2d(0, 0), Translation2d(144, 144))
field.center()                          # (72, 72)
field.width(), field.height()           # (144.0, 144.0)
field.contains(Translation2d(10, 10))   # True; the border itself is outside
```

### Rush-arm approach

`robomath.rush` works out which heading points a side-mounted arm, offset
`RUSH_ARM_OFFSET` (7 units) to the right of the robot's centre, at a target,
and where to insert a path point so the robot arrives on that heading:

```python
from robomath.pose2d import Pose2d
from robomath.rotation2d import from_degrees
from robomath.rush import last_rush_points, rush_heading
from robomath.translation2d import Translation2d

rush_heading(Translation2d(60, 40), Pose2d.from_xy(20, 40, from_degrees(0)))  # degrees in [0, 360)
last_rush_points(Translation2d(20, 40), Translation2d(40, 40), Translation2d(60, 30), 8)
```

`last_rush_points` returns three points: the second-last point, the inserted
point `bank_radius` behind the final point along the final heading, and the
final point. Intermediate values are logged at debug level through the
`robomath.rush` logger.

## Numerical integration

`robomath.numerical_integration` provides single steps of Euler
(`euler_*`), explicit midpoint (`rk2_*`) and classic fourth-order
Runge-Kutta (`rk4_*`), each in three forms:

- `*_with_input(f, x, u, h)` for `dx/dt = f(x, u)`;
- `*_without_input(f, x, h)` for `dx/dt = f(x)`;
- `*_time_variant(f, t, y, h)` for `dy/dt = f(t, y)`.

States may be floats or numpy arrays.

```python
import numpy as np
from robomath.numerical_integration import rk4_without_input

x = np.array([1.0])
x = rk4_without_input(lambda x: -x, x, 0.1)   # one step of exponential decay
```

## Interpolating map

```python
from robomath.interpolating_map import InterpolatingMap

rpm_for_distance = InterpolatingMap()
rpm_for_distance.insert(10, 2000)
rpm_for_distance.insert(20, 3000)
rpm_for_distance[15]   # 2500.0
rpm_for_distance[99]   # 3000 (the value at the nearest end)
len(rpm_for_distance)  # 2
```

Inserting a key that is already present keeps the first value. Looking up
anything in an empty map raises `KeyError`. Values may be anything that
supports scaling by a float and addition, such as numpy arrays. `clear()`
removes every pair.

## Square-root unscented Kalman filter

`robomath.srukf.SquareRootUnscentedKalmanFilter` (also available as `SRUKF`)
estimates a state from a nonlinear model `f(x, u)`, giving the state's time
derivative, and a measurement function `h(x, u)`. It uses the scaled
spherical simplex sigma points from `robomath.unscented` (N + 2 points for N
states), keeps the covariance in square-root form, and only accepts a
correction when it lowers the sum of the diagonal of the square-root
covariance.

```python
import numpy as np
from robomath.numerical_integration import rk4_with_input
from robomath.srukf import SquareRootUnscentedKalmanFilter

def f(x, u):
    return np.array([x[1], u[0]])

def h(x, u):
    return np.array([x[0]])

ukf = SquareRootUnscentedKalmanFilter(
    f, h, rk4_with_input,
    state_stddevs=np.array([0.01, 0.1]),
    measurement_stddevs=np.array([0.05]),
)
ukf.sqrt_covariance = np.diag([1.0, 1.0])
ukf.predict(np.array([0.0]), 0.02)
ukf.correct(np.array([0.0]), np.array([0.3]))
ukf.xhat, ukf.covariance()
```

- `xhat` and `sqrt_covariance` are read/write properties; `set_covariance(p)`
  sets the square-root covariance to the lower Cholesky factor of `p`.
- Custom `mean_func_x`, `mean_func_y`, `residual_func_x`, `residual_func_y`
  and `add_func_x` may be passed to the constructor, for example to wrap
  angles.
- `correct` can take a different measurement function `h`, in which case its
  `measurement_stddevs` must be given too (otherwise `ValueError`).
- After `reset()` the estimate and the square-root covariance are zero; set
  the covariance again before filtering.

The building blocks are public in `robomath.unscented`:
`ScaledSphericalSimplexSigmaPoints(states, alpha=0.001, beta=2.0)`,
`square_root_ut(sigmas, wm, wc, mean_func, residual_func, sqrt_r)` and
`cholesky_rank_update(s, v, sigma)`.

## What this package does not do

It is a library of calculations only. It does not drive motors, read
sensors, track odometry, run feedback controllers or schedule autonomous
routines, and it has no command-line program.

## Running the tests

```
pip install "robomath[test]"
pytest
```