from gas_price_oracle.tests.fixtures import *  # noqa: F401, F403
