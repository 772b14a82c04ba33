from setuptools import find_packages, setup

setup(name='xenapi-bindings',
      version='1.0',
      description='Typed Python bindings for the XenAPI, over XML-RPC or '
                  'JSON-RPC.',
      author='Cloud Software Group, Inc.',
      url='https://github.com/xapi-project/xen-api',
      packages=find_packages(exclude=['tests', 'tests.*']),
      python_requires='>=3.8',
      extras_require={
          'exporter': ['aiohttp', 'prometheus_client'],
          'test': ['pytest', 'mock', 'aiohttp', 'prometheus_client'],
      },
      entry_points={
          'console_scripts': [
              'xenapi-call=xenapi_bindings.cli:main',
              'xenapi-exporter=xenapi_bindings.exporter:main [exporter]',
          ],
      },
      classifiers=[
          'License :: OSI Approved :: BSD License',
          'Development Status :: 5 - Production/Stable',
          'Intended Audience :: Developers',
          'Operating System :: POSIX :: Linux',
          'Programming Language :: Python :: 3',
          'Topic :: Software Development :: Libraries :: Python Modules',
          ])
