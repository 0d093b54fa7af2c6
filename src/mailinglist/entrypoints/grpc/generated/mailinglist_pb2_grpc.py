"""Client and server classes for the ``mailinglist.MailingListService`` service."""

import grpc

from mailinglist.entrypoints.grpc.generated import mailinglist_pb2 as mailinglist__pb2

SERVICE_NAME = "mailinglist.MailingListService"

# (method, request type, response type)
_METHODS = (
    ("CreateEmail", mailinglist__pb2.CreateEmailRequest, mailinglist__pb2.EmailResponse),
    ("GetEmail", mailinglist__pb2.GetEmailRequest, mailinglist__pb2.EmailResponse),
    (
        "GetEmailBatch",
        mailinglist__pb2.GetEmailBatchRequest,
        mailinglist__pb2.GetEmailBatchResponse,
    ),
    ("UpdateEmail", mailinglist__pb2.UpdateEmailRequest, mailinglist__pb2.EmailResponse),
    ("DeleteEmail", mailinglist__pb2.DeleteEmailRequest, mailinglist__pb2.EmailResponse),
)


class MailingListServiceStub:
    """Client stub: one callable attribute per RPC."""

    def __init__(self, channel: grpc.Channel) -> None:
        for name, request, response in _METHODS:
            setattr(
                self,
                name,
                channel.unary_unary(
                    f"/{SERVICE_NAME}/{name}",
                    request_serializer=request.SerializeToString,
                    response_deserializer=response.FromString,
                ),
            )


class MailingListServiceServicer:
    """Base servicer; every RPC answers UNIMPLEMENTED until overridden."""

    def _unimplemented(self, context):
        context.set_code(grpc.StatusCode.UNIMPLEMENTED)
        context.set_details("Method not implemented!")
        raise NotImplementedError("Method not implemented!")

    def CreateEmail(self, request, context):  # pylint: disable=invalid-name
        self._unimplemented(context)

    def GetEmail(self, request, context):  # pylint: disable=invalid-name
        self._unimplemented(context)

    def GetEmailBatch(self, request, context):  # pylint: disable=invalid-name
        self._unimplemented(context)

    def UpdateEmail(self, request, context):  # pylint: disable=invalid-name
        self._unimplemented(context)

    def DeleteEmail(self, request, context):  # pylint: disable=invalid-name
        self._unimplemented(context)


def add_MailingListServiceServicer_to_server(  # pylint: disable=invalid-name
    servicer: MailingListServiceServicer, server: grpc.Server
) -> None:
    """Register `servicer`'s RPCs on `server`."""
    rpc_method_handlers = {
        name: grpc.unary_unary_rpc_method_handler(
            getattr(servicer, name),
            request_deserializer=request.FromString,
            response_serializer=response.SerializeToString,
        )
        for name, request, response in _METHODS
    }
    generic_handler = grpc.method_handlers_generic_handler(
        SERVICE_NAME, rpc_method_handlers
    )
    server.add_generic_rpc_handlers((generic_handler,))
