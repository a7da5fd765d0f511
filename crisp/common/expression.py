from crisp.models.container import Endpoint


def parse_endpoint_expression(endpoint_expr: str):
    "name:/path -> Endpoint(name, /path), /path -> Endpoint(None, /path)"

    if ':' not in endpoint_expr:
        return Endpoint(container=None, path=endpoint_expr)

    # split once, file names may contain ':' as well
    container, path = endpoint_expr.split(':', 1)
    return Endpoint(container=container, path=path)


def decode_mount_field(field: str):
    "/mnt/a\\040b -> /mnt/a b"

    if '\\' not in field:
        return field

    output: list[str] = []
    i = 0
    while i < len(field):
        chunk = field[i+1:i+4]
        if field[i] == '\\' and len(chunk) == 3 and all(c in '01234567' for c in chunk):
            output.append(chr(int(chunk, 8)))
            i += 4
        else:
            output.append(field[i])
            i += 1

    return ''.join(output)
