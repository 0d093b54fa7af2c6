# -*- coding: utf-8 -*-
"""Protocol buffer classes for ``protos/mailinglist.proto``.

The file descriptor is spelled out with ``descriptor_pb2`` instead of being
embedded as serialized bytes; registration and class building then go through
the same protobuf runtime calls protoc's Python output makes. Running

    python -m grpc_tools.protoc -I protos --python_out=generated \\
        --grpc_python_out=generated protos/mailinglist.proto

produces equivalent modules (protoc imports ``mailinglist_pb2`` as a top-level
module in the stubs, which has to be made package-relative by hand).
"""

from google.protobuf import descriptor_pb2
from google.protobuf import descriptor_pool as _descriptor_pool
from google.protobuf.internal import builder as _builder

_Field = descriptor_pb2.FieldDescriptorProto


def _field(name, number, field_type, type_name=None, repeated=False):
    field = _Field(
        name=name,
        number=number,
        type=field_type,
        label=_Field.LABEL_REPEATED if repeated else _Field.LABEL_OPTIONAL,
    )
    if type_name is not None:
        field.type_name = type_name
    return field


def _message(name, *fields):
    return descriptor_pb2.DescriptorProto(name=name, field=list(fields))


def _method(name, request, response):
    return descriptor_pb2.MethodDescriptorProto(
        name=name,
        input_type=f".mailinglist.{request}",
        output_type=f".mailinglist.{response}",
    )


_ENTRY = ".mailinglist.EmailEntry"

_FILE = descriptor_pb2.FileDescriptorProto(
    name="mailinglist.proto",
    package="mailinglist",
    syntax="proto3",
    message_type=[
        _message(
            "EmailEntry",
            _field("id", 1, _Field.TYPE_INT64),
            _field("email", 2, _Field.TYPE_STRING),
            _field("confirmed_at", 3, _Field.TYPE_INT64),
            _field("opt_out", 4, _Field.TYPE_BOOL),
        ),
        _message("CreateEmailRequest", _field("email_addr", 1, _Field.TYPE_STRING)),
        _message("GetEmailRequest", _field("email_addr", 1, _Field.TYPE_STRING)),
        _message(
            "UpdateEmailRequest",
            _field("email_entry", 1, _Field.TYPE_MESSAGE, _ENTRY),
        ),
        _message("DeleteEmailRequest", _field("email_addr", 1, _Field.TYPE_STRING)),
        _message(
            "GetEmailBatchRequest",
            _field("page", 1, _Field.TYPE_INT32),
            _field("count", 2, _Field.TYPE_INT32),
        ),
        _message("EmailResponse", _field("email_entry", 1, _Field.TYPE_MESSAGE, _ENTRY)),
        _message(
            "GetEmailBatchResponse",
            _field("email_entries", 1, _Field.TYPE_MESSAGE, _ENTRY, repeated=True),
        ),
    ],
    service=[
        descriptor_pb2.ServiceDescriptorProto(
            name="MailingListService",
            method=[
                _method("CreateEmail", "CreateEmailRequest", "EmailResponse"),
                _method("GetEmail", "GetEmailRequest", "EmailResponse"),
                _method("GetEmailBatch", "GetEmailBatchRequest", "GetEmailBatchResponse"),
                _method("UpdateEmail", "UpdateEmailRequest", "EmailResponse"),
                _method("DeleteEmail", "DeleteEmailRequest", "EmailResponse"),
            ],
        )
    ],
)

DESCRIPTOR = _descriptor_pool.Default().AddSerializedFile(_FILE.SerializeToString())

_globals = globals()
_builder.BuildMessageAndEnumDescriptors(DESCRIPTOR, _globals)
_builder.BuildTopDescriptorsAndMessages(DESCRIPTOR, __name__, _globals)
