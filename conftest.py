# makes the package importable when running the tests from a source checkout
