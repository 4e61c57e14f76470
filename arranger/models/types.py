from typing import Literal, Any

# type aliases for clarity
EthereumAddress = str
Month = str
TokenName = Literal["veAUXO", "xAUXO"]
GraphQL_Response = dict[Literal["data"], Any]
