import setuptools

setuptools.setup(
	name='sexpy',
	version='0.1.0',
	packages=[
		'sexpy',
		'sexpy.support',
	],
	description='Parser combinators for head-pattern s-expressions, with errors that point at the problem',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	python_requires='>=3.9',
	extras_require={
		'test': ['pytest'],
	},
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Topic :: Software Development :: Compilers",
		"Development Status :: 3 - Alpha",
	],
)
