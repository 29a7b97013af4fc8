from .services.openai_client import ClientFactory, build_openai_client


def get_client_factory() -> ClientFactory:
    return build_openai_client
