from .blocks import (N_SPINS, BLOCK_SIZE, N_CONFIGS, configuration_from_index,
                     index_from_configuration, all_configurations, majority_rule, coarse_grain)
from .energy import ring_energy, bond_products
from .renormalization import (RenormRow, ExponentTable, build_row, enumerate_rows,
                              group_exponents, renormalize)
