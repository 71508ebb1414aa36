from langchain_core.messages import AIMessage


class FakeLLM:
    """Sustituto del chat model: registra las consultas y devuelve una respuesta fija."""

    def __init__(self, respuesta=None, error=None):
        self.respuesta = respuesta if respuesta is not None else AIMessage(content="ok")
        self.error = error
        self.herramientas = None
        self.llamadas = []

    def bind_tools(self, tools):
        self.herramientas = tools
        return self

    async def ainvoke(self, mensajes):
        self.llamadas.append(mensajes)
        if self.error:
            raise self.error
        return self.respuesta
