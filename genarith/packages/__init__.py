"""
Each module here installs one numeric package into a GenericArithmetic.
They know nothing of each other, and order of installation does not matter.
"""
from .scheme_number import install_scheme_number_package
from .rational import install_rational_package
from .rectangular import install_rectangular_package
from .polar import install_polar_package
from .complex import install_complex_package

def install_standard_packages(system):
	for install in (
		install_scheme_number_package,
		install_rational_package,
		install_rectangular_package,
		install_polar_package,
		install_complex_package,
	):
		install(system)
