"""
Packaging script for PyPI.
"""
import setuptools

setuptools.setup(
	name='genarith',
	version='0.1.0',
	packages=['genarith', 'genarith.packages', ],
	package_data={
		'genarith': ["Genarith.md", "*.automaton"],
	},
	entry_points={
		'console_scripts': ["genarith = genarith.cmdline:main"],
	},
	license='MIT',
	description='Generic arithmetic: independently-written numeric packages behind one set of operations',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Development Status :: 3 - Alpha",
		"Intended Audience :: Developers",
		"Intended Audience :: Education",
		"Topic :: Scientific/Engineering :: Mathematics",
		"Topic :: Education",
		"Environment :: Console",
    ],
	python_requires='>=3.9',
	install_requires=[
		"booze-tools>=0.6.2.1",
	],
	extras_require={
		'test': ["pytest"],
	},
)
