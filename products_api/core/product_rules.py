"""Product Rule Sets - per-route input constraints for the products API.

Invariants:
    - Declaration order here IS the order of the errores list in a 400 response
    - price carries three independent checks; a non-numeric price still runs
      the positivity check (so "hola" yields two violations)
"""

from products_api.core.validation import (
    RuleSet,
    body,
    has_text,
    is_boolean,
    is_int,
    is_numeric,
    is_positive,
    not_empty,
    param,
)

MSG_INVALID_ID = "ID no valido"
MSG_EMPTY_NAME = "El nombre del producto no puede ir vacio"
MSG_INVALID_VALUE = "Valor no valido"
MSG_EMPTY_PRICE = "El precio del producto no puede ir vacio"
MSG_INVALID_PRICE = "Precio no valido"
MSG_INVALID_AVAILABILITY = "Debes de actualizar el estado del producto"


PRODUCT_ID = param("id").check(is_int, MSG_INVALID_ID)

PRODUCT_NAME = body("name").check(has_text, MSG_EMPTY_NAME)

PRODUCT_PRICE = (
    body("price")
    .check(is_numeric, MSG_INVALID_VALUE)
    .check(not_empty, MSG_EMPTY_PRICE)
    .check(is_positive, MSG_INVALID_PRICE)
)

PRODUCT_AVAILABILITY = body("availability").check(
    is_boolean, MSG_INVALID_AVAILABILITY,
)


# get-by-id, toggle and delete
PRODUCT_ID_RULES = RuleSet((PRODUCT_ID,))

CREATE_PRODUCT_RULES = RuleSet((PRODUCT_NAME, PRODUCT_PRICE))

REPLACE_PRODUCT_RULES = RuleSet(
    (PRODUCT_ID, PRODUCT_NAME, PRODUCT_PRICE, PRODUCT_AVAILABILITY),
)
