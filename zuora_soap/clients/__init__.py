from zuora_soap.clients.soap_client import ZuoraSoapClient

__all__ = ["ZuoraSoapClient"]
