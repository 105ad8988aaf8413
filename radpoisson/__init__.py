# radpoisson/__init__.py
"""
FEM Poisson solver for a radially symmetric core/shell dielectric.

    mesh      -> radpoisson.geometry.builder
    profiles  -> radpoisson.physics.profiles
    assembly  -> radpoisson.discretization.assemble
    solve     -> radpoisson.solver.tridiagonal
    fields    -> radpoisson.postprocess.fields
    pipeline  -> radpoisson.physics.poisson.solve_radial_poisson
"""
__version__ = "0.1.0"
