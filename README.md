# trmsubs

A collection of small numerical and astronomical routines written in plain
Python with no third-party dependencies:

- `trmsubs.ran`: reproducible uniform generators `Ran1`, `Ran2`, `Ran3`,
  `Ran4` (each with a `random()` method and iterable as an endless stream),
  plus the `psdes` hash.
- `trmsubs.poisson`: `poisson(mu, uniform)`, Poisson deviates by rejection.
- `trmsubs.interp`: `linterp` and `numdiff`.
- `trmsubs.planck`: `planck`, `dplanck`, `dlpdlt`.
- `trmsubs.complexnum`: a small `Complex` type.
- `trmsubs.midpoint`: the modified mid-point step `mmid` and
  `PolyExtrapolator` for extrapolating successive estimates to zero step.
- `trmsubs.lud`: `ludcmp`, `lubksb`, `LUDecomposition.solve` and `invert`.
- `trmsubs.llsqr`: general linear least squares with `llsqr`,
  `llsqr_eval`, `llsqr_chisq`, `llsqr_reduced_chisq`, `llsqr_reject` and
  `design_matrix`.
- `trmsubs.jacob`: eigenvalues and eigenvectors of a real symmetric matrix.
- `trmsubs.minimise`: `mnbrak` (returns a `Bracket`) and the line search
  `lnsrch`.
- `trmsubs.poly`: `Poly`, a polynomial in a scaled variable, with binary
  (`to_bytes`/`from_bytes`) and text (`str`/`Poly.parse`) forms.
- `trmsubs.rebin`: `rebin` of data and variances between `Poly` scales,
  averaging or summing (`RebinMode`).
- `trmsubs.position`: `Position`, sky positions with parsing, formatting,
  binary storage and the `dot` product.

Invalid input raises `trmsubs.errors.SubsError` (or its subclass
`PositionError` for positions).

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

Reproducible uniform deviates and Poisson deviates:

```python
from trmsubs.ran import Ran2
from trmsubs.poisson import poisson

gen = Ran2(-12345)
u = gen.random()
n = poisson(4.5, gen.random)
```

Solving a linear system and inverting a matrix:

```python
from trmsubs.lud import ludcmp, invert

a = [[4.0, 3.0], [6.0, 3.0]]
x = ludcmp(a).solve([10.0, 12.0])
inverse = invert(a)
```

Fitting a straight line; errors of zero or less mask points:

```python
from trmsubs.llsqr import design_matrix, llsqr, llsqr_reduced_chisq, llsqr_reject

x = [0.0, 1.0, 2.0, 3.0, 4.0]
y = [1.0, 3.1, 4.9, 7.0, 9.1]
e = [0.1] * 5
func = design_matrix(x, lambda t: [1.0, t])
coeff, covar = llsqr(y, e, func)
chi2 = llsqr_reduced_chisq(y, e, func, coeff)
e, nrej = llsqr_reject(y, e, func, coeff, 3.0, slow=True)
```

Eigen-decomposition and minimum bracketing:

```python
from trmsubs.jacob import jacob
from trmsubs.minimise import mnbrak

values, vectors, nrot = jacob([[2.0, 1.0], [1.0, 2.0]])
bracket = mnbrak(lambda t: (t - 3.0) ** 2, 0.0, 1.0)
```

Scaled polynomials and rebinning:

```python
from trmsubs.poly import Poly
from trmsubs.rebin import rebin, RebinMode

inpoly = Poly.linear(4000.0, 5000.0, 100)
outpoly = Poly.linear(4100.0, 4900.0, 50)
data = [1.0] * 100
var = [0.01] * 100
outdat, outvar = rebin(data, var, 0, 100, inpoly, 50, 0, 50, outpoly, RebinMode.AVERAGE)
```

Sky positions:

```python
from trmsubs.position import Position, dot

pos = Position.parse("01:10:12.2 +20:00:34.3")
print(pos.ra_dec())
other = Position.from_sexagesimal(1, 12, 0.0, "+", 21, 0, 0.0, 2000.0)
cos_sep = dot(pos, other)
```

The Planck function, with wavelength in nanometres and temperature in
kelvin, giving W/m²/Hz/sr:

```python
from trmsubs.planck import planck

b = planck(550.0, 5800.0)
```

## What it does not do

There is no command-line program, no interactive parameter prompting with
stored defaults, and no plotting. `Position` handles coordinates as given:
it does not apply proper motion between epochs, and it does not compute
altitude and azimuth, airmass or barycentric and heliocentric corrections.