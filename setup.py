from setuptools import setup


def readme():
    with open('README.md') as f:
        return f.read()

setup(
    name='ratio',
    version='1.0.0',
    description='Exact rational arithmetic over 64-bit integers',
    long_description=readme(),
    long_description_content_type='text/markdown',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Programming Language :: Python :: 3',
        'Framework :: IPython',
        'Framework :: Jupyter',
        'Intended Audience :: Developers',
        'Intended Audience :: Education',
        'License :: OSI Approved :: MIT License',
        'Natural Language :: English',
        'Operating System :: OS Independent',
        'Topic :: Education',
        'Topic :: Scientific/Engineering :: Mathematics',
    ],
    keywords='rational fraction exact arithmetic gcd',
    license='MIT',
    packages=['ratio'],
    scripts=[
        'bin/ratio-calc',
    ],
    install_requires=[
        'plac',
    ],
    extras_require={
        'test': ['pytest'],
    },
    include_package_data=True,
    zip_safe=False,
)
