from swap_sdk.utility.address import validate_and_parse_address
