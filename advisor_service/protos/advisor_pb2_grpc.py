# Client and server classes corresponding to protobuf-defined services.
"""gRPC bindings for weatheradvisor.AdvisorService (advisor.proto)."""
import grpc

from advisor_service.protos import advisor_pb2 as advisor__service_dot_protos_dot_advisor__pb2


class AdvisorServiceStub(object):
    """Client stub for AdvisorService."""

    def __init__(self, channel):
        """Constructor.

        Args:
            channel: A grpc.Channel.
        """
        self.GetAdvice = channel.unary_unary(
                '/weatheradvisor.AdvisorService/GetAdvice',
                request_serializer=advisor__service_dot_protos_dot_advisor__pb2.AdvisorRequest.SerializeToString,
                response_deserializer=advisor__service_dot_protos_dot_advisor__pb2.AdvisorResponse.FromString,
                )
        self.StreamAdvice = channel.unary_stream(
                '/weatheradvisor.AdvisorService/StreamAdvice',
                request_serializer=advisor__service_dot_protos_dot_advisor__pb2.AdvisorRequest.SerializeToString,
                response_deserializer=advisor__service_dot_protos_dot_advisor__pb2.StreamAdviceResponse.FromString,
                )
        self.HealthCheck = channel.unary_unary(
                '/weatheradvisor.AdvisorService/HealthCheck',
                request_serializer=advisor__service_dot_protos_dot_advisor__pb2.HealthCheckRequest.SerializeToString,
                response_deserializer=advisor__service_dot_protos_dot_advisor__pb2.HealthCheckResponse.FromString,
                )


class AdvisorServiceServicer(object):
    """Base servicer; every RPC answers UNIMPLEMENTED until overridden."""

    def GetAdvice(self, request, context):
        context.set_code(grpc.StatusCode.UNIMPLEMENTED)
        context.set_details('Method not implemented!')
        raise NotImplementedError('Method not implemented!')

    def StreamAdvice(self, request, context):
        context.set_code(grpc.StatusCode.UNIMPLEMENTED)
        context.set_details('Method not implemented!')
        raise NotImplementedError('Method not implemented!')

    def HealthCheck(self, request, context):
        context.set_code(grpc.StatusCode.UNIMPLEMENTED)
        context.set_details('Method not implemented!')
        raise NotImplementedError('Method not implemented!')


def add_AdvisorServiceServicer_to_server(servicer, server):
    rpc_method_handlers = {
            'GetAdvice': grpc.unary_unary_rpc_method_handler(
                    servicer.GetAdvice,
                    request_deserializer=advisor__service_dot_protos_dot_advisor__pb2.AdvisorRequest.FromString,
                    response_serializer=advisor__service_dot_protos_dot_advisor__pb2.AdvisorResponse.SerializeToString,
            ),
            'StreamAdvice': grpc.unary_stream_rpc_method_handler(
                    servicer.StreamAdvice,
                    request_deserializer=advisor__service_dot_protos_dot_advisor__pb2.AdvisorRequest.FromString,
                    response_serializer=advisor__service_dot_protos_dot_advisor__pb2.StreamAdviceResponse.SerializeToString,
            ),
            'HealthCheck': grpc.unary_unary_rpc_method_handler(
                    servicer.HealthCheck,
                    request_deserializer=advisor__service_dot_protos_dot_advisor__pb2.HealthCheckRequest.FromString,
                    response_serializer=advisor__service_dot_protos_dot_advisor__pb2.HealthCheckResponse.SerializeToString,
            ),
    }
    generic_handler = grpc.method_handlers_generic_handler(
            'weatheradvisor.AdvisorService', rpc_method_handlers)
    server.add_generic_rpc_handlers((generic_handler,))
