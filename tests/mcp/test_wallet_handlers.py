"""Tests for farcaster_dev_mcp.mcp.handlers.wallet."""

from __future__ import annotations

import pytest

from farcaster_dev_mcp.core.exceptions import UnknownToolInDomainException
from farcaster_dev_mcp.mcp.handlers.wallet import (
    KNOWN_CHAINS,
    configure_chains,
    generate_transaction,
    handle_wallet_events,
    handle_wallet_tool,
    setup_wallet_integration,
)
from farcaster_dev_mcp.mcp.params import (
    ConfigureChainsParams,
    GenerateTransactionParams,
    HandleWalletEventsParams,
    SetupWalletIntegrationParams,
)

# ============================================================================
# setup_wallet_integration
# ============================================================================


class TestSetupWalletIntegration:
    """Tests for Wagmi configuration output."""

    def test_react_defaults(self):
        text = setup_wallet_integration(SetupWalletIntegrationParams(framework="react"))

        assert "import { mainnet, base, optimism } from 'wagmi/chains';" in text
        assert "farcasterMiniApp()" in text
        assert "walletConnect({ projectId" in text
        assert "## React App Setup:" in text
        assert "Base (8453)" in text

    def test_chain_aliases_deduplicated(self):
        text = setup_wallet_integration(
            SetupWalletIntegrationParams(framework="vanilla", chains=["ethereum", "mainnet", "Base"])
        )

        assert "chains: [mainnet, base]," in text
        assert "## Vanilla Setup:" in text

    def test_unknown_chain_and_connector(self):
        text = setup_wallet_integration(
            SetupWalletIntegrationParams(framework="vue", chains=["base", "fantom"], includeConnectors=["miniapp", "ledger"])
        )

        assert "fantom: not a known chain" in text
        assert "ledger: unknown connector, skipped" in text
        assert "@wagmi/vue" in text

    def test_no_chains_falls_back_to_base(self):
        text = setup_wallet_integration(SetupWalletIntegrationParams(framework="react", chains=[]))

        assert "[base.id]: http()," in text

    def test_known_chain_ids(self):
        assert KNOWN_CHAINS["base"].chain_id == 8453
        assert KNOWN_CHAINS["optimism"].chain_id == 10
        assert KNOWN_CHAINS["ethereum"] == KNOWN_CHAINS["mainnet"]


# ============================================================================
# generate_transaction
# ============================================================================


class TestGenerateTransaction:
    """Tests for transaction code generation."""

    @pytest.mark.parametrize(
        "tx_type,marker",
        [
            ("erc20-transfer", "export function ERC20Transfer"),
            ("batch", "useSendCalls"),
            ("nft-mint", "export function NFTMint"),
            ("single", "export function SendEth"),
            ("contract-call", "export function ContractCall"),
        ],
    )
    def test_type_template(self, tx_type, marker):
        text = generate_transaction(GenerateTransactionParams(transactionType=tx_type))

        assert text.startswith(f"# {tx_type} Transaction Implementation")
        assert marker in text
        assert "describeTransactionError" in text

    def test_contract_address_and_abi(self):
        text = generate_transaction(
            GenerateTransactionParams(
                transactionType="contract-call",
                contractAddress="0x1234",
                abi='[{"type":"function","name":"ping"}]',
            )
        )

        assert "0x1234" in text
        assert 'const ABI = [{"type":"function","name":"ping"}] as const;' in text

    def test_optional_sections(self):
        text = generate_transaction(
            GenerateTransactionParams(transactionType="single", includeGasEstimation=False, includeTxPreview=False)
        )

        assert "## Gas Estimation:" not in text
        assert "## Transaction Preview Component:" not in text
        assert "Gas estimation (not included)" in text


# ============================================================================
# configure_chains
# ============================================================================


class TestConfigureChains:
    """Tests for chain configuration."""

    def test_defaults(self):
        text = configure_chains(ConfigureChainsParams())

        assert "import { mainnet, base } from 'wagmi/chains';" in text
        assert "export const supportedChains = [mainnet, base] as const;" in text
        assert "1: 'https://etherscan.io'" in text

    def test_custom_rpc(self):
        text = configure_chains(
            ConfigureChainsParams.model_validate(
                {
                    "customRpcs": [
                        {
                            "chainId": 999,
                            "name": "My L3",
                            "rpcUrl": "https://rpc.my-l3.xyz",
                            "explorerUrl": "https://scan.my-l3.xyz",
                        }
                    ]
                }
            )
        )

        assert "export const myL3Chain = defineChain({" in text
        assert "[myL3Chain.id]: http('https://rpc.my-l3.xyz')," in text
        assert "999: 'https://scan.my-l3.xyz'" in text
        assert "My L3 (custom, chain 999)" in text

    def test_no_chains_warns(self):
        text = configure_chains(ConfigureChainsParams(mainnet=False, base=False))

        assert "No chains selected" in text
        assert "from 'wagmi/chains'" not in text


# ============================================================================
# handle_wallet_events
# ============================================================================


class TestHandleWalletEvents:
    """Tests for wallet event hooks."""

    def test_defaults_log(self):
        text = handle_wallet_events(HandleWalletEventsParams())

        assert "console.log('Wallet connected:'" in text
        assert "LOG(" not in text
        assert "describeWalletError" in text

    def test_without_logging(self):
        text = handle_wallet_events(HandleWalletEventsParams(events=["chainChanged"], includeLogging=False))

        assert "console.log" not in text
        assert "console.error" not in text
        assert "emit('wallet:chainChanged', { chainId });" in text
        assert "// connect" not in text

    def test_without_error_handling(self):
        text = handle_wallet_events(HandleWalletEventsParams(includeErrorHandling=False))
        assert "## Error Handling:" not in text

    def test_no_events(self):
        assert "No events selected" in handle_wallet_events(HandleWalletEventsParams(events=[]))


class TestWalletRouting:
    def test_unknown_tool(self):
        with pytest.raises(UnknownToolInDomainException, match="Unknown wallet tool"):
            handle_wallet_tool("farcaster_nope", ConfigureChainsParams())
