from setuptools import setup

setup(name='ledger_export',
      version='0.1',
      description='Render ledger transactions into general-ledger batch files',
      license='GPLv3',
      packages=['ledger_export', 'ledger_export.formats'],
      python_requires='>=3.7',
      install_requires=[
          'click',
          'tabulate',
          'atomicwrites',
      ],
      extras_require={
          'test': ['pytest'],
      },
      entry_points={
          'console_scripts': ['ledger-export=ledger_export.ledger_export:cli'],
      },
      zip_safe=False)
