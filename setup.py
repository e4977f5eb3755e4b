from glob import glob
from setuptools import setup


setup(
    name='rpncalc',
    version='1.0.0',
    description='Interactive RPN calculator',
    install_requires=[
        'regex',
        'prompt_toolkit',
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-cov',
        ],
    },
    packages=['rpncalc'],
    package_dir={'': 'src'},
    include_package_data=True,
    zip_safe=False,
    classifiers=[
        "Programming Language :: Python :: 3",
    ],
    scripts=glob('bin/*'),
    license='ISC',
)
