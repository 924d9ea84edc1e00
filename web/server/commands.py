import json
import logging
from types import SimpleNamespace
from voluptuous import Schema, Required, All, Invalid, Length, Match

import operations
from p256_errors import SignatureError

logger = logging.getLogger(__name__)

# ---------- Helpers ----------

def to_ns(obj):
    if isinstance(obj, dict):
        return SimpleNamespace(**{k: to_ns(v) for k, v in obj.items()})
    if isinstance(obj, list):
        return [to_ns(i) for i in obj]
    return obj

def namespace_to_dict(obj):
    if isinstance(obj, SimpleNamespace):
        return {k: namespace_to_dict(v) for k, v in obj.__dict__.items()}
    elif isinstance(obj, list):
        return [namespace_to_dict(i) for i in obj]
    elif isinstance(obj, dict):
        return {k: namespace_to_dict(v) for k, v in obj.items()}
    else:
        return obj

hex_int = Match(r'^[0-9a-fA-F]{1,64}\Z')
non_empty = All(str, Length(min=1))

# ---------- Schemas ----------

DeriveKeysSchema = Schema({
    Required("type"): "derive_keys",
    Required("seed"): non_empty,
    Required("salt"): non_empty,
}, extra=False)

SignSchema = Schema({
    Required("type"): "sign",
    Required("private_key"): All(str, hex_int),
    Required("message"): non_empty,
}, extra=False)

VerifySchema = Schema({
    Required("type"): "verify",
    Required("public_key"): {
        Required("x"): All(str, hex_int),
        Required("y"): All(str, hex_int),
    },
    Required("message"): str,
    Required("signature"): {
        Required("r"): All(str, hex_int),
        Required("s"): All(str, hex_int),
    },
}, extra=False)


# ---------- Result Builders ----------

def keys_result(private_key: str, public_key: dict):
    return {
        "type": "keys",
        "private_key": private_key,
        "public_key": public_key,
    }

def signature_result(signature: dict):
    return {
        "type": "signature",
        "signature": signature,
    }


# ---------- Command Handlers ----------

async def derive_keys(websocket, message: SimpleNamespace):
    private_key, public_key = operations.derive_keys(message.seed, message.salt)
    return keys_result(private_key, public_key)

async def sign(websocket, message: SimpleNamespace):
    signature = operations.sign(message.private_key, message.message)
    return signature_result(signature)

async def verify(websocket, message: SimpleNamespace):
    valid = operations.verify(
        namespace_to_dict(message.public_key),
        message.message,
        namespace_to_dict(message.signature),
    )
    return operations.render_result(valid)


# ---------- Command Registry ----------

commands = {
    "derive_keys": (derive_keys, DeriveKeysSchema),
    "sign": (sign, SignSchema),
    "verify": (verify, VerifySchema),
}


# ---------- Executor ----------

async def execute_command(websocket, message_string):
    try:
        message = json.loads(message_string)
        if not isinstance(message, dict):
            raise ValueError("Message is not a JSON object")
        if "type" not in message:
            raise ValueError("Message missing 'type' field")
    except ValueError as e:
        await websocket.send(json.dumps({"type": "error", "message": "Invalid JSON", "details": str(e)}))
        return
    command = str(message.get("type"))
    if command not in commands:
        await websocket.send(json.dumps({"type": "error", "message": f"Unknown command: {command}"}))
        return
    command_func, schema = commands[command]

    # -------- Validation via Voluptuous --------
    try:
        validated_dict = schema(message)  # raises if invalid
        validated_message = to_ns(validated_dict)
    except Invalid as e:
        await websocket.send(json.dumps({"type": "error", "message": f"Invalid message format for command {command}", "details": str(e)}))
        return

    # -------- Execute Command --------
    try:
        res = await command_func(websocket, validated_message)
    except SignatureError as e:
        logger.info("Command %s rejected: %s", command, e)
        await websocket.send(json.dumps({"type": "error", "message": f"Error executing command {command}: {str(e)}", "kind": type(e).__name__}))
        return
    except Exception as e:
        logger.exception("Command %s failed", command)
        await websocket.send(json.dumps({"type": "error", "message": f"Error executing command {command}: {str(e)}"}))
        return

    # -------- Send Result --------
    if res is not None:
        await websocket.send(json.dumps(res))
