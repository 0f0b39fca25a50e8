"""
Packaging script for PyPI.
"""
import setuptools

setuptools.setup(
	name='deriving-base',
	author='The deriving-base developers',
	version='0.0.1',
	packages=['deriving'],
	entry_points={
		'console_scripts': ["deriving = deriving.cmdline:main"],
	},
	license='MIT',
	description='A generic representation algebra: write a datatype-generic function once, apply it to any representable type',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Development Status :: 3 - Alpha",
		"Intended Audience :: Developers",
		"Topic :: Software Development :: Libraries",
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
