"""User-facing failure signals emitted by the cart engine."""

OUT_OF_STOCK = "Requested quantity exceeds stock"
ADD_FAILED = "Could not add product"
REMOVE_FAILED = "Could not remove product"
UPDATE_FAILED = "Could not change product quantity"
