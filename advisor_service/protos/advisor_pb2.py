# -*- coding: utf-8 -*-
# Protocol buffer bindings for advisor_service/protos/advisor.proto.
# Keep in sync with advisor.proto; `python -m grpc_tools.protoc -I . --python_out=.
# --grpc_python_out=. advisor_service/protos/advisor.proto` emits a drop-in replacement.
"""Message classes for the weatheradvisor.AdvisorService contract."""
from google.protobuf import descriptor_pb2 as _descriptor_pb2
from google.protobuf import descriptor_pool as _descriptor_pool
from google.protobuf import symbol_database as _symbol_database
from google.protobuf.internal import builder as _builder

_sym_db = _symbol_database.Default()

_FIELD = _descriptor_pb2.FieldDescriptorProto
_PACKAGE = 'weatheradvisor'


def _field(name, number, field_type, type_name=None, repeated=False):
  field = _FIELD(
      name=name,
      number=number,
      type=field_type,
      label=_FIELD.LABEL_REPEATED if repeated else _FIELD.LABEL_OPTIONAL,
  )
  if type_name:
    field.type_name = '.%s.%s' % (_PACKAGE, type_name)
  return field


def _method(name, input_type, output_type, server_streaming=False):
  return _descriptor_pb2.MethodDescriptorProto(
      name=name,
      input_type='.%s.%s' % (_PACKAGE, input_type),
      output_type='.%s.%s' % (_PACKAGE, output_type),
      server_streaming=server_streaming,
  )


_FILE = _descriptor_pb2.FileDescriptorProto(
    name='advisor_service/protos/advisor.proto',
    package=_PACKAGE,
    syntax='proto3',
    message_type=[
        _descriptor_pb2.DescriptorProto(name='CityData', field=[
            _field('location', 1, _FIELD.TYPE_STRING),
        ]),
        _descriptor_pb2.DescriptorProto(name='AdvisorRequest', field=[
            _field('cities', 1, _FIELD.TYPE_MESSAGE, 'CityData', repeated=True),
        ]),
        _descriptor_pb2.DescriptorProto(name='AdvisorResponse', field=[
            _field('advice', 1, _FIELD.TYPE_STRING),
        ]),
        _descriptor_pb2.DescriptorProto(name='StreamAdviceResponse', field=[
            _field('chunk', 1, _FIELD.TYPE_STRING),
            _field('is_complete', 2, _FIELD.TYPE_BOOL),
        ]),
        _descriptor_pb2.DescriptorProto(name='HealthCheckRequest'),
        _descriptor_pb2.DescriptorProto(name='HealthCheckResponse', field=[
            _field('status', 1, _FIELD.TYPE_STRING),
            _field('service_name', 2, _FIELD.TYPE_STRING),
            _field('version', 3, _FIELD.TYPE_STRING),
        ]),
    ],
    service=[
        _descriptor_pb2.ServiceDescriptorProto(name='AdvisorService', method=[
            _method('GetAdvice', 'AdvisorRequest', 'AdvisorResponse'),
            _method('StreamAdvice', 'AdvisorRequest', 'StreamAdviceResponse', server_streaming=True),
            _method('HealthCheck', 'HealthCheckRequest', 'HealthCheckResponse'),
        ]),
    ],
)

DESCRIPTOR = _descriptor_pool.Default().AddSerializedFile(_FILE.SerializeToString())

_globals = globals()
_builder.BuildMessageAndEnumDescriptors(DESCRIPTOR, _globals)
_builder.BuildTopDescriptorsAndMessages(DESCRIPTOR, __name__, _globals)
