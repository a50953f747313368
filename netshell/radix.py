"""A path tree mapping route words and parameters to handlers."""

from netshell.messages import Method, StatusCode
from netshell.strings import RED, RESET, YELLOW, join_words, split


class Node:
    """One path segment with its children, parameter child and handlers."""

    def __init__(self, word="/", parent=None):
        self.word = word
        self.parent = parent
        self.param = ""
        self.param_node = None
        self.children = {}
        self.handlers = {}
        self.method_middlewares = {}
        self.shared_middlewares = []
        self.methods = []

    def add(self, words, method, middlewares, handlers):
        """Register a route below this node.

        ``words[0]`` names this node. The last handler is the route's
        handler; those before it run as method-specific middlewares.
        ``middlewares`` are shared by every method of the route's node.
        """
        method = Method(method)
        handlers = list(handlers)
        node = self
        for word in words[1:]:
            if word.startswith(":"):
                if node.param and node.param != word:
                    print(
                        f"{RED}Param already defined in this path: "
                        f"{word} | {node.param}{RESET}"
                    )
                    return
                if node.param_node is None:
                    node.param = word
                    node.param_node = Node(word, node)
                node = node.param_node
                continue
            if word not in node.children:
                node.children[word] = Node(word, node)
            node = node.children[word]

        if method in node.handlers:
            route = "/" + join_words(words, "/")
            print(f'{YELLOW}Path "{route}" already registered for this method{RESET}')
            return

        if middlewares and not node.shared_middlewares:
            node.shared_middlewares.extend(middlewares)

        if len(handlers) > 1:
            node.method_middlewares.setdefault(method, []).extend(handlers[:-1])

        if handlers:
            node.handlers[method] = handlers[-1]

        node.methods.append(method)

    def _child_path(self, path):
        if not self.word:
            return path
        return f"{path}/{self.word}" if path else f"/{self.word}"

    def _subnodes(self):
        if self.param_node is not None:
            yield self.param_node
        yield from self.children.values()

    def print_routes(self):
        """Print the path of every node under this one that has handlers."""
        self._print_helper("")

    def _print_helper(self, path):
        current = self._child_path(path)
        if self.handlers:
            print(current)
        for child in self._subnodes():
            child._print_helper(current)

    def collect_routes(self, path=""):
        """Return ``(method, path)`` for every handler under this node."""
        current = self._child_path(path)
        routes = [(method, current) for method in self.handlers]
        for child in self._subnodes():
            routes.extend(child.collect_routes(current))
        return routes


class RadixTree:
    """Route table keyed by the first path word."""

    def __init__(self):
        self._root = {}

    def add(self, words, method, handlers):
        """Register ``handlers`` for ``method`` on the route ``words``."""
        if not words:
            return
        first = words[0]
        if first not in self._root:
            self._root[first] = Node(first)
        self._root[first].add(words, method, [], handlers)

    def handle(self, context):
        """Resolve the context's route and prepare it; return the status."""
        path = context.path
        method = context.request.method
        found = None
        if path.startswith("/"):
            found = self.find_route(split(path[1:], "/"), method)
        if found is None:
            return StatusCode.NOT_FOUND
        node, middlewares, params = found
        if method not in node.handlers:
            return StatusCode.METHOD_NOT_ALLOWED

        context.add_middlewares(middlewares)
        context.set_handler(node.handlers[method])
        context.add_params(params)
        return StatusCode.STATUS_OK

    def find(self, words):
        """Return the node for ``words``, following parameters, or None."""
        if not words or words[0] not in self._root:
            return None
        node = self._root[words[0]]
        for word in words[1:]:
            if word in node.children:
                node = node.children[word]
            elif node.param_node is not None:
                node = node.param_node
            else:
                return None
        return node

    def find_route(self, words, method):
        """Resolve ``words`` for ``method``.

        Return ``(node, middlewares, params)`` or None when no node matches.
        """
        if not words or words[0] not in self._root:
            return None
        node = self._root[words[0]]
        middlewares = list(node.shared_middlewares)
        params = []
        for word in words[1:]:
            if word in node.children:
                node = node.children[word]
            elif node.param_node is not None:
                params.append((node.param, word))
                node = node.param_node
            else:
                return None
            middlewares.extend(node.shared_middlewares)
        middlewares.extend(node.method_middlewares.get(Method(method), []))
        return node, middlewares, params

    @property
    def root(self):
        """The top-level nodes keyed by their word."""
        return self._root

    def print_paths(self):
        """Print every registered route, sorted by path then method."""
        routes = []
        for node in self._root.values():
            routes.extend(node.collect_routes(""))
        routes.sort(key=lambda route: (route[1], route[0]))
        for method, path in routes:
            print(f"[ROUTER-DEBUG] {method.name:<6} {path}")