from time import gmtime, strftime
from setuptools import setup, find_packages


def version(postfix):
     v = strftime("%Y%m%d.%H%M", gmtime())
     return v+postfix


setup(
    name = 'mlp_toolbox',
    packages=find_packages('src'),
    package_dir={'': 'src'},
    zip_safe=False,
    version=version(''),
    python_requires='>=3.8',
    install_requires = ['numpy', 'scipy'],
    extras_require = {'test': ['pytest']},
    entry_points = {
        'console_scripts': [
            'mlp_xor = mlp_toolbox.main:main',
            ],
        }
)
