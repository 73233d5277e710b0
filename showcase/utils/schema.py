# Functions to create the schemas


def get_obj_schema(props, required=None, additional_props=False):

    schema = {
        "type": "object",
        "properties": props,
        "required": list(required or []),
        "additionalProperties": additional_props,
    }

    return schema


def get_arr_schema(
    array_of="objects",
    props=None,
    additional_props=False,
    required=None,
    min_items=0,
    unique_items=False,
):
    """
    get schema for array of objects (or strings)
    """

    items = {"type": "string"}
    if array_of == "objects":
        items = get_obj_schema(props, required, additional_props)

    schema = {
        "type": "array",
        "minItems": min_items,
        "uniqueItems": unique_items,
        "items": items,
    }

    return schema


def get_enum_schema(enum_cls):
    return {"type": "string", "enum": [member.value for member in enum_cls]}
