# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Farcaster Dev MCP Contributors

"""Wallet handlers: Wagmi config, transactions, chains and wallet events."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, NamedTuple

from ...core.exceptions import UnknownToolInDomainException
from ..params import (
    ConfigureChainsParams,
    GenerateTransactionParams,
    HandleWalletEventsParams,
    SetupWalletIntegrationParams,
)
from ._utils import CHECK, WARN, code_block, indent, join_blocks, js_identifier, mark, numbered

logger = logging.getLogger(__name__)


class ChainInfo(NamedTuple):
    export: str
    chain_id: int
    label: str
    explorer: str


KNOWN_CHAINS: dict[str, ChainInfo] = {
    "ethereum": ChainInfo("mainnet", 1, "Ethereum Mainnet", "https://etherscan.io"),
    "mainnet": ChainInfo("mainnet", 1, "Ethereum Mainnet", "https://etherscan.io"),
    "base": ChainInfo("base", 8453, "Base", "https://basescan.org"),
    "optimism": ChainInfo("optimism", 10, "Optimism", "https://optimistic.etherscan.io"),
    "polygon": ChainInfo("polygon", 137, "Polygon", "https://polygonscan.com"),
    "arbitrum": ChainInfo("arbitrum", 42161, "Arbitrum One", "https://arbiscan.io"),
    "zora": ChainInfo("zora", 7777777, "Zora", "https://explorer.zora.energy"),
    "base-sepolia": ChainInfo("baseSepolia", 84532, "Base Sepolia", "https://sepolia.basescan.org"),
    "sepolia": ChainInfo("sepolia", 11155111, "Sepolia", "https://sepolia.etherscan.io"),
}

# name -> (import line, factory call, label)
KNOWN_CONNECTORS: dict[str, tuple[str, str, str]] = {
    "miniapp": (
        "import { farcasterMiniApp } from '@farcaster/miniapp-wagmi-connector';",
        "farcasterMiniApp()",
        "Farcaster Mini App",
    ),
    "injected": ("import { injected } from 'wagmi/connectors';", "injected()", "Injected (browser wallet)"),
    "walletconnect": (
        "import { walletConnect } from 'wagmi/connectors';",
        "walletConnect({ projectId: import.meta.env.VITE_WC_PROJECT_ID })",
        "WalletConnect",
    ),
    "coinbase": (
        "import { coinbaseWallet } from 'wagmi/connectors';",
        "coinbaseWallet({ appName: 'My Mini App' })",
        "Coinbase Wallet",
    ),
}


def _resolve_chains(names: list[str]) -> tuple[list[ChainInfo], list[str]]:
    """Split requested chain names into known chains (deduplicated) and unknown names."""
    known: list[ChainInfo] = []
    unknown: list[str] = []
    for name in names:
        info = KNOWN_CHAINS.get(name.lower())
        if info is None:
            unknown.append(name)
        elif info not in known:
            known.append(info)
    return known, unknown


# ============================================================================
# farcaster_setup_wallet_integration
# ============================================================================


def _wagmi_config(chains: list[ChainInfo], connectors: list[str]) -> str:
    chain_exports = ", ".join(c.export for c in chains) or "base"
    if not chains:
        chains = [KNOWN_CHAINS["base"]]

    imports = ["import { createConfig, http } from 'wagmi';", f"import {{ {chain_exports} }} from 'wagmi/chains';"]
    calls = []
    for name in connectors:
        import_line, call, _ = KNOWN_CONNECTORS[name]
        if import_line not in imports:
            imports.append(import_line)
        calls.append(f"    {call},")

    transports = "\n".join(f"    [{c.export}.id]: http()," for c in chains)
    return "\n".join(
        [
            *imports,
            "",
            "export const config = createConfig({",
            f"  chains: [{chain_exports}],",
            "  connectors: [",
            *calls,
            "  ],",
            "  transports: {",
            transports,
            "  },",
            "});",
        ]
    )


REACT_PROVIDERS = """import { WagmiProvider } from 'wagmi';
import { QueryClient, QueryClientProvider } from '@tanstack/react-query';
import { config } from './config/wagmi';

const queryClient = new QueryClient();

export function Providers({ children }: { children: React.ReactNode }) {
  return (
    <WagmiProvider config={config}>
      <QueryClientProvider client={queryClient}>{children}</QueryClientProvider>
    </WagmiProvider>
  );
}"""

REACT_CONNECT = """import { useAccount, useConnect, useDisconnect } from 'wagmi';

export function WalletConnection() {
  const { isConnected, address, chain } = useAccount();
  const { connect, connectors, isPending } = useConnect();
  const { disconnect } = useDisconnect();

  if (isConnected) {
    return (
      <div className="wallet-connected">
        <p><strong>Address:</strong> {address}</p>
        <p><strong>Chain:</strong> {chain?.name}</p>
        <button onClick={() => disconnect()}>Disconnect</button>
      </div>
    );
  }

  // Inside a Farcaster client the Mini App connector is first and usually already authorized
  return (
    <div className="wallet-connection">
      {connectors.map((connector) => (
        <button
          key={connector.uid}
          onClick={() => connect({ connector })}
          disabled={isPending}
          className="connect-button"
        >
          {connector.name}
        </button>
      ))}
    </div>
  );
}"""

VUE_SETUP = """// main.ts
import { createApp } from 'vue';
import { WagmiPlugin } from '@wagmi/vue';
import { VueQueryPlugin, QueryClient } from '@tanstack/vue-query';
import { config } from './config/wagmi';
import App from './App.vue';

createApp(App)
  .use(WagmiPlugin, { config })
  .use(VueQueryPlugin, { queryClient: new QueryClient() })
  .mount('#root');

// WalletConnection.vue <script setup>
import { useAccount, useConnect, useDisconnect } from '@wagmi/vue';
const { address, isConnected } = useAccount();
const { connect, connectors } = useConnect();
const { disconnect } = useDisconnect();"""

VANILLA_SETUP = """import { connect, disconnect, getAccount, watchAccount } from '@wagmi/core';
import { config } from './config/wagmi';

export async function connectWallet() {
  const [connector] = config.connectors; // Mini App connector first
  return connect(config, { connector });
}

export async function disconnectWallet() {
  await disconnect(config);
}

watchAccount(config, {
  onChange(account) {
    document.querySelector('#address')!.textContent = account.address ?? 'Not connected';
  },
});

console.log('Initial account:', getAccount(config).address);"""

WALLET_CSS = """.wallet-connected {
  padding: 16px;
  border: 1px solid #e5e5e5;
  border-radius: 8px;
  background: #f9f9f9;
  font-family: monospace;
}

.connect-button {
  display: block;
  width: 100%;
  min-height: 44px;
  margin: 8px 0;
  background: #7c65c1;
  color: white;
  border: none;
  border-radius: 6px;
  font-size: 16px;
}

.connect-button:disabled {
  opacity: 0.6;
}"""


def setup_wallet_integration(p: SetupWalletIntegrationParams) -> str:
    chains, unknown_chains = _resolve_chains(p.chains)
    connectors = [c for c in dict.fromkeys(c.lower() for c in p.include_connectors) if c in KNOWN_CONNECTORS]
    unknown_connectors = [c for c in p.include_connectors if c.lower() not in KNOWN_CONNECTORS]

    if p.framework == "react":
        framework_code = join_blocks(
            "## React App Setup:\n" + code_block("tsx", REACT_PROVIDERS),
            "## Wallet Connection Component:\n" + code_block("tsx", REACT_CONNECT),
        )
        packages = "wagmi viem @tanstack/react-query @farcaster/miniapp-wagmi-connector"
    elif p.framework == "vue":
        framework_code = "## Vue Setup:\n" + code_block("ts", VUE_SETUP)
        packages = "@wagmi/vue viem @tanstack/vue-query @farcaster/miniapp-wagmi-connector"
    else:
        framework_code = "## Vanilla Setup:\n" + code_block("ts", VANILLA_SETUP)
        packages = "@wagmi/core viem @farcaster/miniapp-wagmi-connector"

    chain_lines = [f"{CHECK} {c.label} ({c.chain_id})" for c in chains]
    chain_lines += [f"{WARN} {name}: not a known chain, add it with farcaster_configure_chains" for name in unknown_chains]
    connector_lines = [f"{CHECK} {KNOWN_CONNECTORS[c][2]}" for c in connectors]
    connector_lines += [f"{WARN} {name}: unknown connector, skipped" for name in unknown_connectors]

    return join_blocks(
        f"# Wallet Integration Setup ({p.framework})",
        "## Wagmi Configuration (config/wagmi.ts):\n" + code_block("ts", _wagmi_config(chains, connectors)),
        framework_code,
        "## Supported Chains:\n" + "\n".join(chain_lines),
        "## Supported Connectors:\n" + ("\n".join(connector_lines) or f"{WARN} No connectors configured"),
        "## CSS Styling:\n" + code_block("css", WALLET_CSS),
        "## Next Steps:\n"
        + numbered(
            [
                f"Install dependencies: `npm install {packages}`",
                "Render the connection UI inside the providers",
                "Add transaction flows with farcaster_generate_transaction",
                "Test inside a Farcaster client, where the Mini App connector is available",
            ]
        ),
    )


# ============================================================================
# farcaster_generate_transaction
# ============================================================================


def _erc20_transfer(address: str) -> str:
    return f"""import {{ useWriteContract, useWaitForTransactionReceipt }} from 'wagmi';
import {{ erc20Abi, parseUnits }} from 'viem';

export function ERC20Transfer({{ to, amount, decimals = 18 }}: {{ to: `0x${{string}}`; amount: string; decimals?: number }}) {{
  const {{ writeContract, data: hash, isPending, error }} = useWriteContract();
  const {{ isLoading: isConfirming, isSuccess }} = useWaitForTransactionReceipt({{ hash }});

  const send = () =>
    writeContract({{
      address: '{address}',
      abi: erc20Abi,
      functionName: 'transfer',
      args: [to, parseUnits(amount, decimals)],
    }});

  return (
    <div>
      <button onClick={{send}} disabled={{isPending}}>{{isPending ? 'Sending...' : 'Send Tokens'}}</button>
      {{hash && <p>Transaction: {{hash}}</p>}}
      {{isConfirming && <p>Confirming...</p>}}
      {{isSuccess && <p>Success!</p>}}
      {{error && <p className="error">{{error.message}}</p>}}
    </div>
  );
}}"""


BATCH_CODE = """import { useSendCalls, useWaitForCallsStatus } from 'wagmi';
import { encodeFunctionData, erc20Abi, parseEther, parseUnits } from 'viem';

// EIP-5792 batch: the host wallet shows one confirmation for all calls
export function BatchTransactions({ token, spender }: { token: `0x${string}`; spender: `0x${string}` }) {
  const { sendCalls, data, isPending } = useSendCalls();
  const { data: status } = useWaitForCallsStatus({ id: data?.id });

  const run = () =>
    sendCalls({
      calls: [
        {
          to: token,
          data: encodeFunctionData({
            abi: erc20Abi,
            functionName: 'approve',
            args: [spender, parseUnits('100', 18)],
          }),
        },
        { to: spender, value: parseEther('0.01') },
      ],
    });

  return (
    <div>
      <button onClick={run} disabled={isPending}>
        {isPending ? 'Processing Batch...' : 'Approve and Send'}
      </button>
      {status && <p>Status: {status.status}</p>}
    </div>
  );
}"""


def _nft_mint(address: str) -> str:
    return f"""import {{ useWriteContract }} from 'wagmi';
import {{ parseAbi, parseEther }} from 'viem';

const NFT_ABI = parseAbi(['function mint(address to, uint256 quantity) payable']);

export function NFTMint({{ to }}: {{ to: `0x${{string}}` }}) {{
  const {{ writeContract, isPending }} = useWriteContract();

  const mint = () =>
    writeContract({{
      address: '{address}',
      abi: NFT_ABI,
      functionName: 'mint',
      args: [to, 1n],
      value: parseEther('0.001'), // mint price
    }});

  return (
    <button onClick={{mint}} disabled={{isPending}}>
      {{isPending ? 'Minting...' : 'Mint NFT'}}
    </button>
  );
}}"""


def _generic_call(address: str, abi: str | None, single: bool) -> str:
    abi_expr = abi.strip() if abi else "[/* contract ABI */]"
    if single:
        return """import { useSendTransaction } from 'wagmi';
import { parseEther } from 'viem';

export function SendEth({ to }: { to: `0x${string}` }) {
  const { sendTransaction, data: hash, isPending } = useSendTransaction();

  return (
    <div>
      <button onClick={() => sendTransaction({ to, value: parseEther('0.01') })} disabled={isPending}>
        {isPending ? 'Sending...' : 'Send 0.01 ETH'}
      </button>
      {hash && <p>Transaction: {hash}</p>}
    </div>
  );
}"""
    return f"""import {{ useWriteContract }} from 'wagmi';

const ABI = {abi_expr} as const;

export function ContractCall() {{
  const {{ writeContract, isPending }} = useWriteContract();

  const call = () =>
    writeContract({{
      address: '{address}',
      abi: ABI,
      functionName: 'yourFunction',
      args: [/* function arguments */],
    }});

  return (
    <button onClick={{call}} disabled={{isPending}}>
      {{isPending ? 'Processing...' : 'Send Transaction'}}
    </button>
  );
}}"""


GAS_ESTIMATION = """import { useEstimateGas, useGasPrice } from 'wagmi';
import { formatEther } from 'viem';

export function GasEstimate({ to, data, value }: { to: `0x${string}`; data?: `0x${string}`; value?: bigint }) {
  const { data: gas, isLoading, error } = useEstimateGas({ to, data, value });
  const { data: gasPrice } = useGasPrice();

  if (isLoading) return <p>Estimating gas...</p>;
  if (error) return <p>Gas estimation failed: {error.shortMessage ?? error.message}</p>;
  const cost = gas && gasPrice ? formatEther(gas * gasPrice) : '?';
  return <p>Estimated gas: {gas?.toString()} units (~{cost} ETH)</p>;
}"""

TX_PREVIEW = """export function TransactionPreview({ to, value, gas, onConfirm, onCancel }: {
  to: string;
  value: string;
  gas?: string;
  onConfirm: () => void;
  onCancel: () => void;
}) {
  return (
    <div className="tx-preview">
      <h3>Confirm Transaction</h3>
      <p><strong>To:</strong> {to}</p>
      <p><strong>Value:</strong> {value} ETH</p>
      {gas && <p><strong>Gas:</strong> {gas}</p>}
      <div className="tx-actions">
        <button onClick={onConfirm}>Confirm</button>
        <button onClick={onCancel}>Cancel</button>
      </div>
    </div>
  );
}"""

TX_ERRORS = """import { BaseError, UserRejectedRequestError, InsufficientFundsError } from 'viem';

export function describeTransactionError(error: unknown): string {
  if (error instanceof BaseError) {
    if (error.walk((e) => e instanceof UserRejectedRequestError)) return 'Transaction cancelled by user';
    if (error.walk((e) => e instanceof InsufficientFundsError)) return 'Insufficient funds for transaction';
    return error.shortMessage;
  }
  return error instanceof Error ? error.message : 'Transaction failed';
}"""


def generate_transaction(p: GenerateTransactionParams) -> str:
    address = p.contract_address or "0x..."
    tx_type = p.transaction_type
    if tx_type == "erc20-transfer":
        code = _erc20_transfer(address)
    elif tx_type == "batch":
        code = BATCH_CODE
    elif tx_type == "nft-mint":
        code = _nft_mint(address)
    else:
        code = _generic_call(address, p.abi, single=tx_type == "single")

    features = "\n".join(
        [
            f"{mark(p.include_gas_estimation)} Gas estimation" + ("" if p.include_gas_estimation else " (not included)"),
            f"{mark(p.include_tx_preview)} Transaction preview" + ("" if p.include_tx_preview else " (not included)"),
            f"{CHECK} Error handling",
            f"{CHECK} Loading states",
            f"{CHECK} Transaction confirmation",
        ]
    )
    return join_blocks(
        f"# {tx_type} Transaction Implementation",
        "## Transaction Code:\n" + code_block("tsx", code),
        "## Gas Estimation:\n" + code_block("tsx", GAS_ESTIMATION) if p.include_gas_estimation else None,
        "## Transaction Preview Component:\n" + code_block("tsx", TX_PREVIEW) if p.include_tx_preview else None,
        "## Error Handling:\n" + code_block("ts", TX_ERRORS),
        f"## Features Included:\n{features}",
        "## Next Steps:\n"
        + numbered(
            [
                "Replace placeholder addresses and arguments with your contract's",
                "Test on a testnet such as Base Sepolia first",
                "Surface the transaction hash with an explorer link",
            ]
        ),
    )


# ============================================================================
# farcaster_configure_chains
# ============================================================================


def configure_chains(p: ConfigureChainsParams) -> str:
    selected = [
        info
        for enabled, info in (
            (p.mainnet, KNOWN_CHAINS["ethereum"]),
            (p.base, KNOWN_CHAINS["base"]),
            (p.optimism, KNOWN_CHAINS["optimism"]),
            (p.polygon, KNOWN_CHAINS["polygon"]),
        )
        if enabled
    ]

    lines = ["import { createConfig, http } from 'wagmi';", "import { defineChain } from 'viem';"]
    if selected:
        lines.append(f"import {{ {', '.join(c.export for c in selected)} }} from 'wagmi/chains';")
    lines.append("")

    custom_names = []
    for rpc in p.custom_rpcs:
        var = js_identifier(rpc.name) + "Chain"
        custom_names.append(var)
        explorer = ""
        if rpc.explorer_url:
            explorer = f"\n  blockExplorers: {{\n    default: {{ name: '{rpc.name} Explorer', url: '{rpc.explorer_url}' }},\n  }},"
        lines.append(
            f"""export const {var} = defineChain({{
  id: {rpc.chain_id},
  name: '{rpc.name}',
  nativeCurrency: {{ name: 'Ether', symbol: 'ETH', decimals: 18 }},
  rpcUrls: {{
    default: {{ http: ['{rpc.rpc_url}'] }},
  }},{explorer}
}});
"""
        )

    all_chains = [c.export for c in selected] + custom_names
    transports = [f"    [{c.export}.id]: http()," for c in selected]
    transports += [f"    [{var}.id]: http('{rpc.rpc_url}')," for var, rpc in zip(custom_names, p.custom_rpcs)]
    lines += [
        f"export const supportedChains = [{', '.join(all_chains)}] as const;",
        "",
        "export const config = createConfig({",
        "  chains: supportedChains,",
        "  transports: {",
        *transports,
        "  },",
        "});",
    ]

    network_lines = [
        f"{mark(p.mainnet)} Ethereum Mainnet",
        f"{mark(p.base)} Base",
        f"{mark(p.optimism)} Optimism",
        f"{mark(p.polygon)} Polygon",
    ]
    network_lines += [f"{CHECK} {rpc.name} (custom, chain {rpc.chain_id})" for rpc in p.custom_rpcs]

    explorers = [(c.chain_id, c.explorer, c.label) for c in selected]
    explorers += [(rpc.chain_id, rpc.explorer_url, rpc.name) for rpc in p.custom_rpcs if rpc.explorer_url]
    explorer_cases = "\n".join(f"  {cid}: '{url}', // {label}" for cid, url, label in explorers)
    explorer_code = f"""const EXPLORERS: Record<number, string> = {{
{explorer_cases}
}};

export function explorerTxUrl(chainId: number, hash: string) {{
  const base = EXPLORERS[chainId];
  return base ? `${{base}}/tx/${{hash}}` : undefined;
}}"""

    warning = None
    if not all_chains:
        warning = f"{WARN} No chains selected. Wagmi requires at least one chain."
        logger.debug("configure_chains called with every chain disabled")

    return join_blocks(
        "# Chain Configuration",
        "## Supported Networks:\n" + "\n".join(network_lines),
        warning,
        "## Chain Configuration (config/wagmi.ts):\n" + code_block("ts", "\n".join(lines)),
        "## Chain Switcher Component:\n" + code_block("tsx", CHAIN_SWITCHER),
        "## Explorer Links:\n" + code_block("ts", explorer_code),
        "## Best Practices:\n"
        "- Check that the connected chain is supported before sending transactions\n"
        "- Provide clear chain switching UI\n"
        "- Keep token addresses per chain\n"
        "- Use dedicated RPC endpoints in production",
    )


CHAIN_SWITCHER = """import { useChainId, useSwitchChain } from 'wagmi';

export function ChainSwitcher() {
  const chainId = useChainId();
  const { chains, switchChain, isPending } = useSwitchChain();

  return (
    <div className="chain-switcher">
      {chains.map((chain) => (
        <button
          key={chain.id}
          onClick={() => switchChain({ chainId: chain.id })}
          disabled={isPending || chain.id === chainId}
        >
          {chain.name}
        </button>
      ))}
    </div>
  );
}"""


# ============================================================================
# farcaster_handle_wallet_events
# ============================================================================

_EVENT_EFFECTS = {
    "connect": (
        "[isConnected, address]",
        "if (isConnected && address) {\n  LOG('Wallet connected:', { address, connector: connector?.name });\n"
        "  emit('wallet:connected', { address, chainId, connector: connector?.name });\n}",
    ),
    "disconnect": (
        "[isConnected]",
        "if (!isConnected) {\n  LOG('Wallet disconnected');\n  emit('wallet:disconnected');\n}",
    ),
    "accountsChanged": (
        "[address]",
        "if (address) {\n  LOG('Account changed to:', address);\n  emit('wallet:accountChanged', { address });\n}",
    ),
    "chainChanged": (
        "[chainId]",
        "LOG('Chain changed to:', chainId);\nemit('wallet:chainChanged', { chainId });",
    ),
}


def _wallet_event_hook(p: HandleWalletEventsParams) -> str:
    effects = []
    for event in dict.fromkeys(p.events):
        deps, body = _EVENT_EFFECTS[event]
        if p.include_logging:
            body = body.replace("LOG(", "console.log(")
        else:
            body = "\n".join(line for line in body.splitlines() if "LOG(" not in line)
        effects.append(f"  // {event}\n  useEffect(() => {{\n{indent(body, 4)}\n  }}, {deps});")

    return "\n".join(
        [
            "import { useEffect } from 'react';",
            "import { useAccount, useChainId } from 'wagmi';",
            "",
            "const emit = (name: string, detail?: unknown) => window.dispatchEvent(new CustomEvent(name, { detail }));",
            "",
            "export function useWalletEvents() {",
            "  const { address, isConnected, connector } = useAccount();",
            "  const chainId = useChainId();",
            "",
            "\n\n".join(effects),
            "}",
        ]
    )


def _wallet_error_handler(include_logging: bool) -> str:
    log = "\n  console.error('Wallet error:', error);" if include_logging else ""
    return f"""import {{ useEffect }} from 'react';
import {{ useConnect }} from 'wagmi';
import {{ UserRejectedRequestError, ChainNotConfiguredError }} from 'viem';

export function describeWalletError(error: Error): string {{{log}
  if (error instanceof UserRejectedRequestError) return 'Connection request was cancelled';
  if (error instanceof ChainNotConfiguredError) return 'Please switch to a supported network';
  if (error.name === 'ConnectorNotConnectedError') return 'Wallet connection was lost';
  return error.message || 'An error occurred with your wallet';
}}

export function useWalletErrors(onError: (message: string) => void) {{
  const {{ error }} = useConnect();
  useEffect(() => {{
    if (error) onError(describeWalletError(error));
  }}, [error, onError]);
}}"""


def handle_wallet_events(p: HandleWalletEventsParams) -> str:
    return join_blocks(
        "# Wallet Event Handling",
        "## Events Handled:\n" + "\n".join(f"{CHECK} {event}" for event in dict.fromkeys(p.events)),
        "## Event Hook:\n" + code_block("tsx", _wallet_event_hook(p)) if p.events else f"{WARN} No events selected.",
        "## Error Handling:\n" + code_block("ts", _wallet_error_handler(p.include_logging))
        if p.include_error_handling
        else None,
        "## Listening Elsewhere in the App:\n"
        + code_block(
            "ts",
            "window.addEventListener('wallet:connected', (e) => {\n"
            "  const { address } = (e as CustomEvent).detail;\n"
            "  // refresh balances, unlock features...\n"
            "});",
        ),
    )


WALLET_HANDLERS: dict[str, Callable[[Any], str]] = {
    "farcaster_setup_wallet_integration": setup_wallet_integration,
    "farcaster_generate_transaction": generate_transaction,
    "farcaster_configure_chains": configure_chains,
    "farcaster_handle_wallet_events": handle_wallet_events,
}


def handle_wallet_tool(name: str, params: Any) -> str:
    """Route a wallet tool to its handler."""
    handler = WALLET_HANDLERS.get(name)
    if handler is None:
        raise UnknownToolInDomainException(name, "wallet")
    return handler(params)
