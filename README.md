# dualdiff

Forward-mode automatic differentiation for Python functions, built on
dual numbers and their relatives. Write a function once with ordinary
arithmetic and the number types carry exact derivatives through it: no
finite differences, no symbolic algebra.

## Number types

| Module                    | Types                                              | What they carry                     |
|---------------------------|----------------------------------------------------|-------------------------------------|
| `dualdiff.dual`           | `Dual64`, `DualVec64`                              | first derivatives                   |
| `dualdiff.dual2`          | `Dual2_64`, `Dual2Dual64`, `Dual2Vec64`            | first and second derivatives        |
| `dualdiff.dual3`          | `Dual3_64`, `Dual3Dual64`                          | first, second and third derivatives |
| `dualdiff.hyperdual`      | `HyperDual64`, `HyperDualDual64`, `HyperDualVec64` | mixed second partial derivatives    |
| `dualdiff.hyperhyperdual` | `HyperHyperDual64`                                 | mixed third partial derivatives     |

The `...Dual64` variants (`Dual2Dual64`, `Dual3Dual64`, `HyperDualDual64`)
hold `Dual64` numbers in their fields, so they nest one more derivative.
The `...Vec64` variants hold NumPy arrays of derivatives, or `None` where
a derivative is identically zero.

All of them derive from `dualdiff.base.DualNumber` and share:

- the operators `+`, `-`, `*`, `/`, `**`, unary `-` and `abs()` with
  each other and with plain real numbers (`%` raises `TypeError`);
- ordering comparisons by the real part, and `float()` for the real part;
- `from_re`, `total` and `product` class methods;
- elementary functions `recip`, `exp`, `exp_m1`, `exp2`, `ln`, `log`,
  `ln_1p`, `log2`, `log10`, `sqrt`, `cbrt`, `powf`, `powi`, `sin`, `cos`,
  `tan`, `asin`, `acos`, `atan`, `atan2`, `sinh`, `cosh`, `tanh`,
  `asinh`, `acosh`, `atanh`;
- spherical Bessel functions `sph_j0`, `sph_j1`, `sph_j2` and Bessel
  functions `bessel_j0`, `bessel_j1`, `bessel_j2`;
- `signum`, `abs_sub`, `is_zero`, `is_positive`, `is_negative`.

The derivative parts are read through properties such as
`first_derivative`, `second_derivative` and `third_derivative`, or
through the fields directly (`eps`, `v1`, `v2`, `v3`, `eps1`, `eps2`,
`eps1eps2`, ...).

## Derivatives of functions

```python
from dualdiff.dual import first_derivative

f, df = first_derivative(lambda x: x * x + x.sqrt(), 4.0)
# f == 18.0, df == 8.25
```

```python
from dualdiff.hyperdual import second_partial_derivative

f, f_x, f_y, f_xy = second_partial_derivative(
    lambda x, y: x * x * y - y * y * y, 3.0, 4.0
)
# f == -28.0, f_x == 24.0, f_y == -39.0, f_xy == 6.0
```

The other helpers follow the same pattern:

- `dualdiff.dual`: `first_derivative(f, x)`, `gradient(f, x)`,
  `jacobian(f, x)` (at most 10 variables)
- `dualdiff.dual2`: `second_derivative(f, x)`, `hessian(f, x)`
- `dualdiff.dual3`: `third_derivative(f, x)`
- `dualdiff.hyperdual`: `second_partial_derivative(f, x, y)`,
  `partial_hessian(f, x, y)`
- `dualdiff.hyperhyperdual`: `third_partial_derivative(f, x, y, z)`,
  `third_partial_derivative_vec(f, x, i, j, k)`

Multivariate helpers take a list of floats and call `f` with a list of
dual numbers; results come back as floats and lists of floats. A function
that returns something other than the expected dual number (or, for
`jacobian`, a list of them) raises `TypeError`, as does passing a single
number where a list is expected. `third_partial_derivative_vec` raises
`IndexError` for a variable index outside the list.

## Working with numbers directly

```python
from dualdiff.dual import Dual64

x = Dual64.from_re(1.2).derivative()   # seed dx/dx = 1
y = x.sin()
# y.re == sin(1.2), y.eps == cos(1.2)
```

## Linear algebra on dual numbers

`dualdiff.linalg` works on nested lists of plain floats or of dual
numbers alike, so derivatives flow through it:

- `LU(a)`: LU decomposition with partial pivoting, with `solve(b)`,
  `determinant()` and `inverse()`; a singular matrix raises `LinAlgError`
  (a `ValueError`).
- `norm(x)`: Euclidean norm of a vector.
- `jacobi_eigenvalue(a, max_iter=200)`: eigenvalues in ascending order of
  the real part and the eigenvectors as columns of a symmetric matrix.
- `smallest_ev(a)`: the smallest eigenvalue and its eigenvector.

```python
from dualdiff.linalg import LU, norm

lu = LU([[4.0, 3.0], [6.0, 3.0]])
lu.determinant()          # -6.0
lu.solve([10.0, 12.0])    # [1.0, 2.0]
norm([3.0, 4.0])          # 5.0
```

## What it does not do

Differentiation is forward mode only and all numbers are built on Python
floats; there is no reverse mode and no single-precision variant. The
package is a library with no command-line program.