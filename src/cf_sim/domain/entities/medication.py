from enum import Enum


class MedicationKind(str, Enum):
    # declaration order is the catalog order
    A = "A"
    B = "B"
    C = "C"
